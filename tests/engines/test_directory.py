import itertools
import logging

import pytest

from engines.directory import NapDirectory, round_half_up, utilisation_percent
from models.enums import NapState
from models.network import NetworkAccessPoint


def nap(nap_id, total, active, status="operational", **extra) -> NetworkAccessPoint:
    data = {
        "nap_id": nap_id,
        "municipality": extra.pop("municipality", "Odiongan"),
        "barangay": extra.pop("barangay", "Poblacion"),
        "circuit_id": extra.pop("circuit_id", f"PON-{nap_id}"),
        "concentrator_id": extra.pop("concentrator_id", f"LCP-{nap_id}"),
        "total_ports": total,
        "active_ports": active,
        "status": status,
    }
    data.update(extra)
    return NetworkAccessPoint(**data)


def visible_ids(directory: NapDirectory) -> list[str]:
    return [n.nap_id for n in directory.compute_visible_set()]


# --- Filtering --- #


def test_scenario_state_filter_on_single_nap():
    directory = NapDirectory([nap("N1", total=16, active=11)])
    assert directory.get("N1").available_ports == 5

    directory.set_filter(state="full")
    assert visible_ids(directory) == []

    directory.set_filter(state="available")
    assert visible_ids(directory) == ["N1"]


def test_unfiltered_shows_whole_catalog_in_order(directory):
    assert visible_ids(directory) == [n.nap_id for n in directory.catalog]


def test_municipality_filter(directory):
    directory.set_filter(municipality="San Andres")
    assert visible_ids(directory) == ["NAP-SAN-01", "NAP-SAN-02"]


def test_state_filter_uses_derived_state(directory):
    directory.set_filter(state="full")
    # NAP-SAG-01 has no free ports but is under maintenance, so it is not "full"
    assert visible_ids(directory) == ["NAP-ODG-02"]

    directory.set_filter(state="maintenance")
    assert visible_ids(directory) == ["NAP-SAG-01"]


@pytest.mark.parametrize(
    "term, expected",
    [
        ("poblacion", ["NAP-SAN-01", "NAP-CAL-01"]),
        ("PON-ODG", ["NAP-ODG-01", "NAP-ODG-02"]),
        ("lcp-sag", ["NAP-SAG-01"]),
        ("nap-cal", ["NAP-CAL-01"]),
        ("  calunacon  ", ["NAP-SAN-02"]),
        ("odiongan", []),  # municipality is not a searchable field
    ],
)
def test_search_is_case_insensitive_substring(directory, term, expected):
    directory.set_filter(search=term)
    assert visible_ids(directory) == expected


def test_filters_compose(directory):
    directory.set_filter(municipality="San Andres", state="available", search="calunacon")
    assert visible_ids(directory) == ["NAP-SAN-02"]


def test_set_filter_merges_partial_criteria(directory):
    directory.set_filter(municipality="Odiongan")
    directory.set_filter({"state": "available"})
    assert directory.criteria.municipality == "Odiongan"
    assert directory.criteria.state == "available"
    assert visible_ids(directory) == ["NAP-ODG-01"]


def test_unknown_selector_value_matches_nothing(directory):
    directory.set_filter(state="decommissioned")
    assert visible_ids(directory) == []
    assert directory.active_nap_id is None

    directory.set_filter(state="all", municipality="Atlantis")
    assert visible_ids(directory) == []


def test_unknown_filter_field_is_ignored(directory, caplog):
    with caplog.at_level(logging.WARNING):
        visible = directory.set_filter(colour="red")
    assert [n.nap_id for n in visible] == [n.nap_id for n in directory.catalog]
    assert "unknown directory filter field 'colour'" in caplog.text


def test_blank_selector_resets_to_all(directory):
    directory.set_filter(municipality="Calatrava")
    directory.set_filter(municipality="")
    assert directory.criteria.municipality == "all"


def test_reset_filter(directory):
    directory.set_filter(municipality="Calatrava", search="x")
    directory.reset_filter()
    assert directory.criteria.is_unfiltered()
    assert len(visible_ids(directory)) == 6


def test_visible_set_is_ordered_subset_for_all_combinations(directory):
    catalog_ids = [n.nap_id for n in directory.catalog]
    municipalities = ["all", "Odiongan", "San Andres", "Nowhere"]
    states = ["all"] + [s.value for s in NapState] + ["bogus"]
    searches = ["", "poblacion", "pon", "zzz"]
    for municipality, state, search in itertools.product(municipalities, states, searches):
        directory.set_filter(municipality=municipality, state=state, search=search)
        ids = visible_ids(directory)
        positions = [catalog_ids.index(i) for i in ids]
        assert positions == sorted(positions)
        if ids:
            assert directory.active_nap_id in ids
        else:
            assert directory.active_nap_id is None


# --- Aggregates --- #


def test_aggregates_for_whole_catalog(directory):
    agg = directory.compute_aggregates(directory.compute_visible_set())
    assert agg.count == 6
    assert agg.total_ports == 116
    assert agg.active_ports == 87
    assert agg.total_available_ports == 29
    assert agg.utilisation_percent == 75


def test_aggregates_for_municipality(directory):
    agg = directory.compute_aggregates(directory.set_filter(municipality="San Andres"))
    assert agg.count == 2
    assert agg.total_available_ports == 14
    assert agg.utilisation_percent == 71  # 34 / 48


def test_aggregates_empty_set_is_zero(directory):
    agg = directory.compute_aggregates([])
    assert agg.count == 0
    assert agg.utilisation_percent == 0


def test_utilisation_zero_when_no_ports():
    directory = NapDirectory([nap("N0", total=0, active=0)])
    assert directory.compute_aggregates(directory.compute_visible_set()).utilisation_percent == 0


@pytest.mark.parametrize(
    "active, total, expected",
    [(1, 8, 13), (1, 200, 1), (1, 3, 33), (2, 3, 67), (0, 10, 0), (10, 10, 100), (0, 0, 0)],
)
def test_utilisation_percent_rounds_half_up(active, total, expected):
    assert utilisation_percent(active, total) == expected


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(0.5) == 1
    assert round_half_up(2.49) == 2


# --- Selection --- #


def test_first_nap_selected_on_load(directory):
    assert directory.active_nap_id == "NAP-ODG-01"


def test_empty_catalog_has_no_selection():
    directory = NapDirectory([])
    assert directory.active_nap_id is None
    assert directory.resolve_active_detail().placeholder


def test_select_known_visible_nap(directory):
    assert directory.select("NAP-CAL-01")
    assert directory.active_nap_id == "NAP-CAL-01"


def test_select_unknown_nap_is_noop(directory):
    assert not directory.select("NAP-XXX-99")
    assert directory.active_nap_id == "NAP-ODG-01"


def test_select_hidden_nap_is_noop(directory):
    directory.set_filter(municipality="Odiongan")
    assert not directory.select("NAP-CAL-01")
    assert directory.active_nap_id == "NAP-ODG-01"


def test_selection_survives_refilter_when_still_visible(directory):
    directory.select("NAP-SAN-02")
    directory.set_filter(municipality="San Andres")
    assert directory.active_nap_id == "NAP-SAN-02"


def test_selection_falls_back_to_first_visible(directory):
    directory.select("NAP-SAN-02")
    directory.set_filter(state="full")
    assert directory.active_nap_id == "NAP-ODG-02"


def test_selection_cleared_then_restored(directory):
    directory.set_filter(search="no-such-nap")
    assert directory.active_nap_id is None
    directory.set_filter(search="")
    assert directory.active_nap_id == "NAP-ODG-01"


# --- Active detail --- #


def test_detail_uses_focus_customer_verbatim(directory):
    directory.select("NAP-SAG-01")
    detail = directory.resolve_active_detail()
    assert detail.name == "Maintenance window"
    assert detail.port == "Temporarily offline"
    assert detail.nap_id == "NAP-SAG-01"


def test_detail_synthesized_from_next_port_hint(directory):
    directory.select("NAP-SAN-02")  # no focus customer in the seed data
    detail = directory.resolve_active_detail()
    assert detail.name == "Next install slot"
    assert detail.circuit_id == "PON-SAN-03"
    assert detail.concentrator_id == "LCP-SAN-02"
    assert detail.nap_id == "NAP-SAN-02"
    assert detail.port == "09"


def test_detail_synthesized_without_hint_uses_next_active_port():
    directory = NapDirectory([nap("N1", total=16, active=4)])
    assert directory.resolve_active_detail().port == "05"


def test_detail_synthesized_for_full_nap():
    directory = NapDirectory([nap("N1", total=8, active=8, next_port=3)])
    detail = directory.resolve_active_detail()
    assert detail.name == "Fully utilised"
    assert detail.port == "All ports reserved"


def test_detail_placeholder_when_nothing_visible(directory):
    directory.set_filter(municipality="Nowhere")
    detail = directory.resolve_active_detail()
    assert detail.placeholder
    assert detail.name == "No NAP selected"


# --- View --- #


def test_build_view(directory):
    directory.set_filter(municipality="Odiongan")
    view = directory.build_view()
    assert [r.nap_id for r in view.rows] == ["NAP-ODG-01", "NAP-ODG-02"]
    assert [r.is_active for r in view.rows] == [True, False]
    assert view.rows[1].status_label == "Fully utilised"
    assert view.rows[0].available_ports == 5
    assert view.active_nap_id == "NAP-ODG-01"
    assert view.active_detail.name == "Juan Dela Cruz"
    assert view.aggregates.count == 2
    assert view.municipalities == ["Calatrava", "Odiongan", "San Agustin", "San Andres"]
