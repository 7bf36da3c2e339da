"""Filter/sort engine tests."""

import pytest

from src.api.schemas import Product
from src.client.store import SortMode, ViewState
from src.client.view import derive_view, filter_and_sort, parse_price, parse_rating


def _p(title: str, price: str | None = None, rating: str | None = None, sponsored: bool = False) -> Product:
    return Product(
        title=title,
        product_url=f"https://www.amazon.com/dp/{title}",
        price=price,
        rating=rating,
        is_sponsored=sponsored,
    )


PRODUCTS = (
    _p("a", price="$19.99", rating="4.1"),
    _p("b", price=None, rating="4.8", sponsored=True),
    _p("c", price="$1,299.00", rating=None),
    _p("d", price="$19.99", rating="4.8"),
    _p("e", price="$5.00", rating="3.0", sponsored=True),
)


def _titles(products) -> list[str]:
    return [p.title for p in products]


# --- parsing (sync) ---


@pytest.mark.parametrize(
    "price, expected",
    [
        ("$29.99", 29.99),
        ("$1,299.00", 1299.0),
        ("$1,234,567.89", 1234567.89),
        ("$2999", 2999.0),
        (None, 0.0),
        ("", 0.0),
        ("$--", 0.0),
    ],
)
def test_parse_price(price, expected):
    assert parse_price(price) == pytest.approx(expected)


@pytest.mark.parametrize("rating, expected", [("4.5", 4.5), ("5", 5.0), (None, 0.0), ("n/a", 0.0)])
def test_parse_rating(rating, expected):
    assert parse_rating(rating) == pytest.approx(expected)


def test_sort_mode_accepts_rating_alias():
    assert SortMode.parse("rating") is SortMode.RATING_DESC
    assert SortMode.parse("price-asc") is SortMode.PRICE_ASC


def test_unknown_sort_mode_leaves_order_unsorted():
    assert SortMode.parse("cheapest") is SortMode.NONE
    state = ViewState(products=PRODUCTS).with_sort_mode("cheapest")
    assert _titles(derive_view(state)) == ["a", "b", "c", "d", "e"]


# --- derived view ---


def test_none_keeps_fetched_order():
    assert _titles(derive_view(ViewState(products=PRODUCTS))) == ["a", "b", "c", "d", "e"]


def test_hide_sponsored_is_stable_filter():
    state = ViewState(products=PRODUCTS, hide_sponsored=True)
    assert _titles(derive_view(state)) == ["a", "c", "d"]


def test_price_asc_puts_missing_price_first_and_is_stable():
    view = filter_and_sort(PRODUCTS, sort_mode=SortMode.PRICE_ASC)
    assert _titles(view) == ["b", "e", "a", "d", "c"]


def test_price_desc_is_stable_for_ties():
    view = filter_and_sort(PRODUCTS, sort_mode=SortMode.PRICE_DESC)
    assert _titles(view) == ["c", "a", "d", "e", "b"]


def test_rating_desc_missing_rating_last():
    view = filter_and_sort(PRODUCTS, sort_mode=SortMode.RATING_DESC)
    assert _titles(view) == ["b", "d", "a", "e", "c"]


def test_filter_then_sort():
    state = ViewState(products=PRODUCTS, hide_sponsored=True, sort_mode=SortMode.PRICE_DESC)
    assert _titles(derive_view(state)) == ["c", "a", "d"]


def test_toggling_hide_sponsored_restores_original_order():
    state = ViewState(products=PRODUCTS)
    original = derive_view(state)

    state = state.with_hide_sponsored(True)
    assert len(derive_view(state)) == 3
    state = state.with_hide_sponsored(False).with_sort_mode("none")

    assert derive_view(state) == original
    assert _titles(derive_view(state)) == _titles(PRODUCTS)


def test_recompute_is_idempotent():
    state = ViewState(products=PRODUCTS, sort_mode=SortMode.RATING_DESC, hide_sponsored=True)
    assert derive_view(state) == derive_view(state)


def test_raw_products_are_not_reordered():
    state = ViewState(products=PRODUCTS, sort_mode=SortMode.PRICE_ASC)
    derive_view(state)
    assert state.products == PRODUCTS


def test_state_changes_return_new_state():
    state = ViewState(products=PRODUCTS)
    sorted_state = state.with_sort_mode(SortMode.PRICE_ASC)
    assert sorted_state is not state
    assert state.sort_mode is SortMode.NONE
    assert state.with_products([]).products == ()
