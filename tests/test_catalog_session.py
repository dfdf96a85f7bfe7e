"""
Tests for CatalogSession: UI filter policy, debounced search and reset.
"""

import pytest

from storefront.models.filter_state import FilterState
from storefront.services.catalog_session import CatalogSession


class ManualTimer:
    instances = []

    def __init__(self, interval, function, args=None, kwargs=None):
        self.function = function
        self.args = args or ()
        self.daemon = False
        ManualTimer.instances.append(self)

    def start(self):
        pass

    def cancel(self):
        pass

    def fire(self):
        self.function(*self.args)


@pytest.fixture
def published():
    return []


@pytest.fixture
def session(catalog, published):
    ManualTimer.instances = []
    return CatalogSession(
        catalog,
        on_results=lambda products: published.append([p.id for p in products]),
        timer_factory=ManualTimer,
    )


def test_initial_results_are_full_catalog(session, catalog):
    assert session.results() == list(catalog)


def test_select_publishes_filtered_results(session, published):
    session.select('category', 'iphone')
    session.select('series', '16')
    assert published[-1] == ['iph-16-pro-max', 'iph-16', 'iph-16-pink', 'iph-16-white']


def test_leaving_iphone_category_resets_series(session, published):
    session.select('category', 'iphone')
    session.select('series', '15')
    session.select('category', 'repuesto')

    assert session.state.series == 'all'
    assert not session.series_visible
    assert published[-1] == ['rep-camara-frontal-15', 'rep-camara-trasera-14', 'rep-bateria-15']


def test_series_kept_while_category_is_iphone(session):
    session.select('series', '17')
    session.select('category', 'iphone')
    assert session.state.series == '17'
    assert session.series_visible


def test_unknown_group_is_rejected(session):
    with pytest.raises(ValueError):
        session.select('color', 'rosa')


def test_search_is_debounced_to_last_query(session, published):
    session.search('a')
    session.search('ai')
    session.search('airpods')
    assert published == []
    assert session.search_pending

    ManualTimer.instances[-1].fire()
    assert published == [['acc-airpods-4']]
    assert session.state.search == 'airpods'


def test_flush_applies_pending_search(session, published):
    session.search('usb-c')
    session.flush()
    assert session.state.search == 'usb-c'
    assert 'acc-cable-typec' in published[-1]


def test_reset_cancels_pending_search_and_restores_catalog(session, published, catalog):
    session.select('condition', 'certificado')
    session.search('crema')
    session.reset()

    assert session.state.is_default()
    assert not session.search_pending
    assert published[-1] == [p.id for p in catalog]

    # the cancelled timer firing late must not re-apply the query
    ManualTimer.instances[-1].fire()
    assert session.state.search == ''


def test_seed_applies_external_filter(session):
    assert session.seed('certificado')
    assert [p.id for p in session.results()] == ['iph-15-black', 'iph-15-cream', 'iph-15-white']


def test_restore_keeps_series_when_category_is_all(session, published):
    session.restore(FilterState(category='all', series='16'))
    assert session.state.series == '16'
    assert session.series_visible
    assert published[-1] == ['iph-16-pro-max', 'iph-16', 'iph-16-pink', 'iph-16-white']


def test_restore_drops_series_for_non_iphone_category(session, published):
    session.restore(FilterState(category='accesorio', series='16'))
    assert session.state.series == 'all'
    assert published[-1] == ['acc-cargador-40w', 'acc-cable-typec', 'acc-airpods-4']


def test_restore_cancels_pending_search(session):
    session.search('crema')
    session.restore(FilterState())
    assert not session.search_pending
    ManualTimer.instances[-1].fire()
    assert session.state.search == ''
