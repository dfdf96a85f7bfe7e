"""
Tests for catalog loading and data invariants.
"""

import dataclasses
import json

import pytest

from storefront.models.product import CatalogDataError, Product
from storefront.services.catalog import ProductCatalog
from storefront.services.product_repository import SEED_PRODUCTS, ProductRepository


def _record(**overrides):
    record = {
        'id': 'iph-x',
        'name': 'iPhone X',
        'category': 'iphone',
        'series': 10,
        'condition': 'nuevo',
        'specs': ['A11'],
        'gallery': ['x.png'],
        'description': 'Clásico',
        'waMessage': 'Hola, me interesa el iPhone X',
    }
    record.update(overrides)
    return record


def test_seed_catalog_shape(catalog):
    assert catalog.count == len(SEED_PRODUCTS) == 16
    categories = [p.category for p in catalog]
    assert categories.count('iphone') == 10
    assert categories.count('accesorio') == 3
    assert categories.count('repuesto') == 3


def test_seed_catalog_respects_invariants(catalog):
    ids = [p.id for p in catalog]
    assert len(ids) == len(set(ids))
    for product in catalog:
        assert (product.series is not None) == (product.category == 'iphone')
        assert len(product.gallery) >= 1
        assert product.contact_message


def test_products_are_immutable(catalog):
    product = catalog.products[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        product.name = 'otro'
    assert isinstance(catalog.products, tuple)


def test_from_dict_accepts_legacy_message_keys():
    assert Product.from_dict(_record()).contact_message == 'Hola, me interesa el iPhone X'
    assert Product.from_dict(_record(contactMessage='hola')).contact_message == 'hola'


@pytest.mark.parametrize('overrides', [
    {'id': ''},
    {'name': None},
    {'category': 'tablet'},
    {'condition': 'usado'},
    {'series': None},
    {'series': '16'},
    {'series': 0},
    {'category': 'accesorio', 'series': 16},
    {'gallery': []},
])
def test_from_dict_rejects_invalid_records(overrides):
    with pytest.raises(CatalogDataError):
        Product.from_dict(_record(**overrides))


def test_duplicate_ids_are_rejected():
    product = Product.from_dict(_record())
    with pytest.raises(CatalogDataError):
        ProductCatalog([product, product])


def test_load_from_json_file(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text(json.dumps({'products': [_record(), _record(id='iph-xs', name='iPhone XS')]}), encoding='utf-8')

    catalog = ProductRepository(str(path)).load_catalog()
    assert [p.id for p in catalog] == ['iph-x', 'iph-xs']


def test_missing_json_file_raises(tmp_path):
    with pytest.raises(CatalogDataError):
        ProductRepository(str(tmp_path / 'missing.json')).load_catalog()


def test_malformed_json_file_raises(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{not json', encoding='utf-8')
    with pytest.raises(CatalogDataError):
        ProductRepository(str(path)).load_catalog()


def test_json_must_hold_a_list(tmp_path):
    path = tmp_path / 'wrong.json'
    path.write_text(json.dumps({'items': []}), encoding='utf-8')
    with pytest.raises(CatalogDataError):
        ProductRepository(str(path)).load_catalog()
