"""Tests for JSON output files."""

import json

import pytest

from x_news_search.models.news import NewsResult
from x_news_search.models.search_output import SearchOutput
from x_news_search.storage.json_writer import JsonWriter


@pytest.fixture
def search_output():
    return SearchOutput(query="gold + silver", news=[NewsResult(id="1", headline="Gold")])


@pytest.mark.asyncio
async def test_write_to_explicit_path(tmp_path, search_output):
    target = tmp_path / "nested" / "result.json"

    filepath = await JsonWriter().write_search_output(search_output, str(target))

    assert filepath == str(target)
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["news"][0]["headline"] == "Gold"
    assert "updatedAt" in data["news"][0]


@pytest.mark.asyncio
async def test_write_to_directory_generates_name(tmp_path, search_output):
    filepath = await JsonWriter().write_search_output(search_output, str(tmp_path))

    assert filepath.startswith(str(tmp_path / "gold_silver_"))
    assert filepath.endswith(".json")


@pytest.mark.asyncio
async def test_write_without_path_uses_output_dir(tmp_path, search_output):
    filepath = await JsonWriter(str(tmp_path)).write_search_output(search_output)

    assert filepath.startswith(str(tmp_path))


def test_generate_filename_sanitizes_query():
    name = JsonWriter().generate_filename('"AI" + #crypto/news')

    assert name.startswith("AI_crypto_news_")
    assert name.endswith(".json")
    assert JsonWriter().generate_filename("+++").startswith("search_")
