import asyncio

import httpx
import pytest

from storefront.core.exceptions import NotPublic, ParseError
from storefront.database import fallback
from storefront.models.product import CatalogName, CatalogSource, Product
from storefront.services.catalog import TIMEOUT_MESSAGE, CatalogLoader, SheetSource
from storefront.sheets.images import print_images
from storefront.sheets.mapper import map_print


def _product(product_id, name="Print"):
    return Product(id=product_id, name=name, price=10, image="/placeholder.svg")


def _loader(source, fallback_list=fallback.load_prints, timeout=1.0):
    return CatalogLoader(
        name=CatalogName.PRINTS,
        source=source,
        fallback=fallback_list,
        timeout=timeout,
    )


@pytest.mark.asyncio
async def test_successful_load_replaces_snapshot():
    async def source():
        return [_product("a"), _product("b")]

    loader = _loader(source)
    state = await loader.load()

    assert state.loading is False
    assert state.error is None
    assert state.source == CatalogSource.SHEET
    assert [p.id for p in state.products] == ["a", "b"]
    assert loader.get_product("b").id == "b"
    assert loader.get_product("zzz") is None


@pytest.mark.asyncio
async def test_slow_source_falls_back_to_static_data():
    async def source():
        await asyncio.sleep(5)
        return [_product("late")]

    loader = _loader(source, timeout=0.05)
    state = await loader.load()

    assert state.loading is False
    assert state.error == TIMEOUT_MESSAGE
    assert state.source == CatalogSource.FALLBACK
    assert state.products == fallback.load_prints()


@pytest.mark.asyncio
async def test_source_error_message_is_exposed():
    async def source():
        raise NotPublic("Sheet is not publicly accessible")

    state = await _loader(source).load()

    assert state.error == "Sheet is not publicly accessible"
    assert len(state.products) == 11


@pytest.mark.asyncio
async def test_failing_fallback_leaves_catalog_empty():
    async def source():
        raise RuntimeError("network down")

    def broken_fallback():
        raise RuntimeError("fallback missing")

    state = await _loader(source, fallback_list=broken_fallback).load()

    assert state.loading is False
    assert state.error == "network down"
    assert state.products == []
    assert state.source is None


@pytest.mark.asyncio
async def test_result_after_close_is_discarded():
    release = asyncio.Event()

    async def source():
        await release.wait()
        return [_product("a")]

    loader = _loader(source)
    task = asyncio.create_task(loader.load())
    await asyncio.sleep(0)
    assert loader.state.loading is True

    loader.close()
    assert loader.state.loading is False
    release.set()
    await task

    assert loader.mounted is False
    assert loader.state.products == []
    assert loader.state.source is None


@pytest.mark.asyncio
async def test_newer_load_wins_over_stale_one():
    release = asyncio.Event()
    calls = []

    async def slow():
        await release.wait()
        return [_product("old")]

    async def fast():
        return [_product("new")]

    def source():
        calls.append(len(calls))
        return slow() if len(calls) == 1 else fast()

    loader = _loader(source)
    first = asyncio.create_task(loader.load())
    await asyncio.sleep(0)

    await loader.load()
    release.set()
    await first

    assert [p.id for p in loader.state.products] == ["new"]


@pytest.mark.asyncio
async def test_sheet_source_runs_the_pipeline():
    csv_text = 'id,title,price\n1,"Tiger, Portrait",420\n1,Duplicate,5\n'
    transport = httpx.MockTransport(lambda r: httpx.Response(200, text=csv_text))

    async with httpx.AsyncClient(transport=transport) as client:
        source = SheetSource(
            url="https://sheets.test/a.csv",
            fetch_timeout=5,
            map_row=lambda row: map_print(row, print_images),
            client=client,
        )
        products = await source()

    assert len(products) == 1
    assert products[0].name == "Tiger, Portrait"
    assert products[0].price == 420


@pytest.mark.asyncio
async def test_sheet_with_no_rows_is_an_error():
    transport = httpx.MockTransport(lambda r: httpx.Response(200, text="id,title,price\n"))

    async with httpx.AsyncClient(transport=transport) as client:
        source = SheetSource(
            url="https://sheets.test/a.csv",
            fetch_timeout=5,
            map_row=lambda row: map_print(row, print_images),
            client=client,
        )
        with pytest.raises(ParseError):
            await source()
