"""
API and page tests through the Flask test client.
"""

import json
import re
from urllib.parse import parse_qs, urlparse

import pytest

from storefront import create_app
from storefront.models.product import CatalogDataError


def test_list_products_without_filters(client):
    response = client.get('/api/v1/products/')
    payload = response.get_json()

    assert response.status_code == 200
    assert payload['success'] is True
    assert payload['count'] == payload['total'] == 16
    assert payload['message'] == '16 resultados'


def test_list_products_series_16(client):
    payload = client.get('/api/v1/products/?category=iphone&series=16').get_json()
    assert [card['id'] for card in payload['data']] == [
        'iph-16-pro-max', 'iph-16', 'iph-16-pink', 'iph-16-white'
    ]
    assert payload['filters']['series'] == '16'


def test_list_products_seed_param(client):
    payload = client.get('/api/v1/products/?filter=certificado').get_json()
    assert payload['count'] == 3
    assert all(card['badge']['label'] == 'Certificado' for card in payload['data'])


def test_list_products_malformed_series_is_empty_not_error(client):
    response = client.get('/api/v1/products/?series=abc')
    assert response.status_code == 200
    assert response.get_json()['data'] == []


def test_filter_options(client):
    payload = client.get('/api/v1/products/filters').get_json()
    assert payload['data']['series'] == ['17', '16', '15']


def test_product_detail(client):
    payload = client.get('/api/v1/products/iph-15-cream').get_json()
    data = payload['data']
    assert data['badge']['label'] == 'Certificado PSM'
    assert data['warranty']['title'] == '60 días de garantía PSM'
    assert data['contact_url'].startswith('https://wa.me/584146395496?text=')


def test_product_detail_not_found(client):
    response = client.get('/api/v1/products/nonexistent-id')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_related_products(client):
    payload = client.get('/api/v1/products/acc-cable-typec/related').get_json()
    assert [card['id'] for card in payload['data']] == ['acc-cargador-40w', 'acc-airpods-4']
    assert payload['count'] == 2


def test_related_products_limit_and_unknown(client):
    payload = client.get('/api/v1/products/iph-17/related?limit=2').get_json()
    assert payload['count'] == 2
    assert client.get('/api/v1/products/nope/related').status_code == 404


def test_search_endpoint(client):
    payload = client.get('/api/v1/search/?q=A18%20PRO').get_json()
    assert [card['id'] for card in payload['data']] == ['iph-16-pro-max']
    assert payload['query'] == 'A18 PRO'


def test_unknown_api_route_returns_json_envelope(client):
    response = client.get('/api/v1/unknown')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_b2b_inquiry_api_validation(client):
    response = client.post('/api/v1/b2b/inquiry', json={'name': 'Ana'})
    payload = response.get_json()
    assert response.status_code == 400
    assert [e['field'] for e in payload['errors']] == ['business', 'products']


def test_b2b_inquiry_api_success(client):
    response = client.post(
        '/api/v1/b2b/inquiry',
        data={'name': 'Ana', 'business': 'Celulares Ana', 'products': 'Cables'},
    )
    url = response.get_json()['data']['url']
    text = parse_qs(urlparse(url).query)['text'][0]
    assert response.status_code == 200
    assert '🏬 *Negocio:* Celulares Ana' in text


def test_landing_page(client):
    response = client.get('/')
    assert response.status_code == 200
    assert 'iPhone 17 Pro Max' in response.get_data(as_text=True)


def test_catalog_page_renders_filtered_grid(client):
    html = client.get('/catalogo?category=iphone&series=16').get_data(as_text=True)
    assert '4 resultados' in html
    assert 'iPhone 16 Rosa' in html
    assert 'iPhone 15 Crema' not in html


def test_catalog_form_series_with_all_categories(client):
    html = client.get('/catalogo?category=all&series=16&condition=all&q=').get_data(as_text=True)
    assert '4 resultados' in html
    assert re.findall(r'data-product-id="([^"]+)"', html) == [
        'iph-16-pro-max', 'iph-16', 'iph-16-pink', 'iph-16-white'
    ]
    assert 'filter-group--hidden' not in html


def test_catalog_page_resets_series_for_non_iphone_category(client):
    html = client.get('/catalogo.html?category=accesorio&series=16').get_data(as_text=True)
    assert '3 resultados' in html
    assert 'filter-group--hidden' in html


def test_catalog_page_empty_state(client):
    html = client.get('/catalogo?q=galaxy').get_data(as_text=True)
    assert '0 resultados' in html
    assert 'reset-filters' in html


def test_catalog_page_escapes_search_text(client):
    html = client.get('/catalogo?q=<script>').get_data(as_text=True)
    assert '<script>' not in html


def test_product_page(client):
    html = client.get('/producto?id=rep-bateria-15').get_data(as_text=True)
    assert 'Batería iPhone 15 Pro Max | Phone Store Maracaibo' in html
    assert '30 días de garantía PSM' in html
    assert 'related-section' in html


@pytest.mark.parametrize('url', ['/producto', '/producto?id=', '/producto.html?id=nonexistent-id'])
def test_product_page_redirects_to_catalog(client, url):
    response = client.get(url)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/catalogo')


def test_b2b_page_shows_errors(client):
    response = client.post('/b2b-miami', data={'name': 'Ana'})
    html = response.get_data(as_text=True)
    assert response.status_code == 400
    assert 'negocio o empresa' in html
    assert 'value="Ana"' in html


def test_b2b_page_redirects_to_messaging(client):
    response = client.post(
        '/b2b-miami',
        data={'name': 'Ana', 'business': 'Celulares Ana', 'products': 'Cables'},
    )
    assert response.status_code == 303
    assert response.headers['Location'].startswith('https://wa.me/584146395496?text=')


def test_app_uses_configured_catalog_file(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text(json.dumps([{
        'id': 'acc-funda',
        'name': 'Funda MagSafe',
        'category': 'accesorio',
        'series': None,
        'condition': 'nuevo',
        'specs': ['MagSafe'],
        'gallery': ['funda.png'],
        'contactMessage': 'Hola, me interesa la funda',
    }]), encoding='utf-8')

    client = create_app({'TESTING': True, 'DATA_PATH': str(path)}).test_client()
    payload = client.get('/api/v1/products/').get_json()
    assert [card['id'] for card in payload['data']] == ['acc-funda']


def test_app_refuses_to_start_with_bad_catalog(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text(json.dumps([{'id': 'x', 'name': 'X', 'category': 'iphone', 'condition': 'nuevo'}]), encoding='utf-8')
    with pytest.raises(CatalogDataError):
        create_app({'TESTING': True, 'DATA_PATH': str(path)})
