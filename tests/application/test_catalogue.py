"""Tests for the catalogue and query use cases."""

import pytest

from orderbot.application.add_product import AddProductHandler
from orderbot.application.set_inventory import SetInventoryHandler
from orderbot.application.show_inventory import ShowInventoryHandler
from orderbot.application.show_order import ShowOrderHandler
from orderbot.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeInventoryStore, product, setup


class TestAddProduct:

    @pytest.mark.asyncio
    async def test_adds_product(self):
        store = FakeInventoryStore()
        handler = AddProductHandler(store)

        added = await handler.handle("TS01", " Cotton Tee ", "250", "450", {"m": 2, "L": 1})

        assert added.id == "doc-TS01"
        saved = await store.get_product("TS01")
        assert saved.name == "Cotton Tee"
        assert saved.sizes == {"M": 2, "L": 1}
        assert saved.available_amount == 3
        assert str(saved.buying_price) == "250.00"
        assert str(saved.selling_price) == "450.00"

    @pytest.mark.asyncio
    async def test_duplicate_rejected(self):
        store = FakeInventoryStore([product("TS01", {"M": 1})])
        with pytest.raises(ValidationError, match="already exists"):
            await AddProductHandler(store).handle("TS01", "Tee", "1", "2")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("product_id", ["", "  ", "TS-01"])
    async def test_bad_product_id_rejected(self, product_id):
        with pytest.raises(ValidationError):
            await AddProductHandler(FakeInventoryStore()).handle(product_id, "Tee", "1", "2")

    @pytest.mark.asyncio
    async def test_bad_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            await AddProductHandler(FakeInventoryStore()).handle("TS01", "Tee", "x", "2")


class TestSetInventory:

    @pytest.mark.asyncio
    async def test_sets_size_and_recomputes_total(self):
        store = FakeInventoryStore([product("TS01", {"M": 1})])

        updated = await SetInventoryHandler(store).handle("TS01", "l", 4)

        assert updated.sizes == {"M": 1, "L": 4}
        assert (await store.get_product("TS01")).available_amount == 5

    @pytest.mark.asyncio
    async def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            await SetInventoryHandler(FakeInventoryStore()).handle("NOPE", "M", 1)


class TestQueries:

    @pytest.mark.asyncio
    async def test_show_inventory(self):
        store = FakeInventoryStore([product("TS01", {"M": 1, "L": 2}, buying="10", selling="20")])

        (line,) = await ShowInventoryHandler(store).handle()

        assert line.product_id == "TS01"
        assert line.sizes == {"L": 2, "M": 1}
        assert line.available == 3
        assert line.buying_price == "10.00"
        assert line.selling_price == "20.00"

    @pytest.mark.asyncio
    async def test_show_order(self):
        h = await setup([product("TS01", {"M": 1}, buying="100", selling="250")])
        result = await h.handler.handle(
            "Name: Sumi\nProduct code: TS01-M\nCOD: 300\nPaid in advance: 0", "u-7"
        )

        dto = await ShowOrderHandler(h.ledger).handle(result.order_id)

        assert dto.id == result.order_id
        assert dto.customer_name == "Sumi"
        assert dto.customer_phone == ""
        assert dto.status == "confirmed"
        assert dto.profit == "200.00"
        assert dto.cod_amount == "300.00"
        assert dto.user_id == "u-7"
        assert dto.created_at.endswith("UTC")
        assert [(i.product_name, i.size) for i in dto.items] == [("Product TS01", "M")]

    @pytest.mark.asyncio
    async def test_show_missing_order(self):
        h = await setup([])
        with pytest.raises(EntityNotFoundError, match="not found"):
            await ShowOrderHandler(h.ledger).handle("missing")
