import pytest
from protean.exceptions import ValidationError

from storefront.catalogue.category.category import Category


def test_create_trims_name():
    category = Category.create("  Books ")
    assert category.name == "Books"
    assert category.created_at is not None


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_is_rejected(name):
    with pytest.raises(ValidationError) as exc:
        Category.create(name)
    assert "name" in exc.value.messages
