"""Tests for ProductRepository.search paging and filtering."""

from protean import current_domain

from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.management import CreateProduct
from storefront.catalogue.product.product import Product

NAMES = ["Smart TV", "Macbook Pro", "PC Gamer", "The Lord of the Rings", "PC Gamer Ex"]


def _seed():
    category_id = current_domain.process(CreateCategory(name="All"), asynchronous=False)
    for name in NAMES:
        current_domain.process(
            CreateProduct(
                name=name,
                description="Lorem ipsum dolor sit amet",
                price=100.0,
                category_ids=[category_id],
            ),
            asynchronous=False,
        )
    return category_id


def _names(result):
    return [product.name for product in result.items]


class TestSearch:
    def test_empty_filter_returns_everything_ordered_by_name(self):
        _seed()
        result = current_domain.repository_for(Product).search(page=0, size=10)

        assert result.total == 5
        assert _names(result) == sorted(NAMES)

    def test_ordering_ignores_case(self):
        category_id = _seed()
        current_domain.process(
            CreateProduct(
                name="apple watch",
                description="Lorem ipsum dolor sit amet",
                price=100.0,
                category_ids=[category_id],
            ),
            asynchronous=False,
        )
        result = current_domain.repository_for(Product).search(page=0, size=10)

        assert _names(result)[0] == "apple watch"
        assert _names(result) == sorted(NAMES + ["apple watch"], key=str.casefold)

    def test_filter_is_case_insensitive_substring(self):
        _seed()
        result = current_domain.repository_for(Product).search(name="gamer", page=0, size=10)

        assert _names(result) == ["PC Gamer", "PC Gamer Ex"]
        assert result.total == 2

    def test_pages_are_zero_based_and_disjoint(self):
        _seed()
        repo = current_domain.repository_for(Product)

        first = _names(repo.search(page=0, size=2))
        second = _names(repo.search(page=1, size=2))
        third = _names(repo.search(page=2, size=2))

        assert first + second + third == sorted(NAMES)
        assert len(third) == 1

    def test_same_arguments_return_the_same_page(self):
        _seed()
        repo = current_domain.repository_for(Product)

        assert _names(repo.search(name="pc", page=0, size=1)) == _names(repo.search(name="pc", page=0, size=1))

    def test_page_past_the_end_is_empty(self):
        _seed()
        result = current_domain.repository_for(Product).search(page=9, size=10)
        assert _names(result) == []
        assert result.total == 5
