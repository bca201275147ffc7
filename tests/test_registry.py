from __future__ import annotations

import pytest

from picker.models import AppEntry, ChromeProfile
from picker.registry import DEFAULT_HEIGHT, Registry, UnknownEntryError, default_snapshot


def _registry(*entries: AppEntry) -> Registry:
    reg = Registry()
    reg.entries = list(entries)
    return reg


def _keys(reg: Registry) -> list:
    return reg.keys()


def _profile(app_id: str, profile_id: str, name: str | None = None) -> ChromeProfile:
    return ChromeProfile(app_id=app_id, profile_id=profile_id, display_name=name or profile_id)


# ----------------------------
# reconcile_installed_apps
# ----------------------------
def test_installed_apps_are_appended_in_scan_order() -> None:
    reg = Registry()
    reg.reconcile_installed_apps(["Safari", "Firefox"])

    assert _keys(reg) == [("Safari", None), ("Firefox", None)]
    assert all(e.installed and e.hotkey is None for e in reg.entries)


def test_missing_app_is_kept_but_marked_uninstalled() -> None:
    reg = _registry(
        AppEntry("Safari", hotkey="s"),
        AppEntry("Firefox", hotkey="f"),
    )
    reg.reconcile_installed_apps(["Safari"])

    firefox = reg.find("Firefox")
    assert firefox is not None
    assert firefox.installed is False
    assert firefox.hotkey == "f"
    assert [e.app_id for e in reg.installed_entries()] == ["Safari"]


def test_reinstalled_app_keeps_position_and_hotkey() -> None:
    reg = _registry(
        AppEntry("Firefox", hotkey="f", installed=False),
        AppEntry("Safari"),
    )
    reg.reconcile_installed_apps(["Safari", "Firefox", "Arc"])

    assert _keys(reg) == [("Firefox", None), ("Safari", None), ("Arc", None)]
    assert reg.find("Firefox").installed is True
    assert reg.find("Firefox").hotkey == "f"


def test_installed_scan_does_not_touch_profile_entries() -> None:
    reg = _registry(
        AppEntry("Google Chrome", "Profile 1", installed=True, display_name="Work"),
    )
    reg.reconcile_installed_apps([])

    assert reg.find("Google Chrome", "Profile 1").installed is True


def test_profile_entry_does_not_count_as_whole_app_entry() -> None:
    reg = _registry(AppEntry("Google Chrome", "Profile 1", display_name="Work"))
    reg.reconcile_installed_apps(["Google Chrome"])

    assert _keys(reg) == [("Google Chrome", "Profile 1"), ("Google Chrome", None)]


def test_installed_scan_is_idempotent() -> None:
    once = _registry(AppEntry("Opera", installed=False), AppEntry("Safari", hotkey="s"))
    twice = _registry(AppEntry("Opera", installed=False), AppEntry("Safari", hotkey="s"))
    ids = ["Safari", "Firefox", "Safari"]

    once.reconcile_installed_apps(ids)
    twice.reconcile_installed_apps(ids)
    twice.reconcile_installed_apps(ids)

    assert once.to_dict() == twice.to_dict()
    assert _keys(once).count(("Safari", None)) == 1


# ----------------------------
# reconcile_profiles
# ----------------------------
def test_profiles_are_appended_with_display_names() -> None:
    reg = Registry()
    reg.reconcile_installed_apps(["Google Chrome"])
    reg.reconcile_profiles([
        _profile("Google Chrome", "Default", "Personal"),
        _profile("Google Chrome", "Profile 1", "Work"),
    ])

    assert _keys(reg) == [
        ("Google Chrome", None),
        ("Google Chrome", "Default"),
        ("Google Chrome", "Profile 1"),
    ]
    work = reg.find("Google Chrome", "Profile 1")
    assert work.display_name == "Work"
    assert work.label == "Google Chrome — Work"


def test_profile_scan_is_authoritative_for_profile_installed_state() -> None:
    reg = _registry(
        AppEntry("Google Chrome", "Default", hotkey="p", display_name="Personal"),
        AppEntry("Google Chrome", "Profile 1", hotkey="w", display_name="Work"),
        AppEntry("Safari"),
    )
    reg.reconcile_profiles([_profile("Google Chrome", "Profile 1", "Work (renamed)")])

    personal = reg.find("Google Chrome", "Default")
    work = reg.find("Google Chrome", "Profile 1")
    assert personal.installed is False
    assert personal.hotkey == "p"
    assert work.installed is True
    assert work.display_name == "Work (renamed)"
    assert reg.find("Safari").installed is True


def test_empty_profile_scan_marks_all_profiles_absent_without_deleting() -> None:
    reg = _registry(
        AppEntry("Brave Browser", "Default", display_name="A"),
        AppEntry("Brave Browser", "Profile 2", display_name="B"),
    )
    before = set(_keys(reg))
    reg.reconcile_profiles([])

    assert set(_keys(reg)) == before
    assert reg.installed_entries() == []


def test_single_profile_scenario_keeps_one_whole_app_entry() -> None:
    # gating happens in discovery: a single profile is never handed over
    reg = Registry()
    reg.reconcile_installed_apps(["X"])
    reg.reconcile_profiles([])

    assert _keys(reg) == [("X", None)]
    assert reg.find("X").installed is True


# ----------------------------
# assign_hotkey
# ----------------------------
def test_assign_hotkey_moves_code_from_previous_holder() -> None:
    reg = _registry(AppEntry("Safari", hotkey="s"), AppEntry("Firefox"))
    reg.assign_hotkey("Firefox", None, "s")

    assert reg.find("Safari").hotkey is None
    assert reg.find("Firefox").hotkey == "s"


def test_assign_hotkey_targets_profile_entries() -> None:
    reg = _registry(
        AppEntry("Google Chrome"),
        AppEntry("Google Chrome", "Profile 1", display_name="Work"),
    )
    reg.assign_hotkey("Google Chrome", "Profile 1", "w")

    assert reg.find("Google Chrome").hotkey is None
    assert reg.find("Google Chrome", "Profile 1").hotkey == "w"


def test_reassigning_own_hotkey_keeps_it() -> None:
    reg = _registry(AppEntry("Safari", hotkey="s"))
    reg.assign_hotkey("Safari", None, "s")
    assert reg.find("Safari").hotkey == "s"


def test_assign_none_clears_hotkey() -> None:
    reg = _registry(AppEntry("Safari", hotkey="s"), AppEntry("Firefox", hotkey="f"))
    reg.assign_hotkey("Safari", None, None)

    assert reg.find("Safari").hotkey is None
    assert reg.find("Firefox").hotkey == "f"


def test_hotkeys_stay_unique_across_many_assignments() -> None:
    reg = _registry(*(AppEntry(name) for name in ["A", "B", "C", "D"]))
    for app_id, code in [("A", "x"), ("B", "x"), ("C", "y"), ("D", "x"), ("A", "y"), ("B", "z")]:
        reg.assign_hotkey(app_id, None, code)

    codes = [e.hotkey for e in reg.entries if e.hotkey is not None]
    assert len(codes) == len(set(codes))
    assert reg.find("D").hotkey == "x"
    assert reg.find("A").hotkey == "y"
    assert reg.find("C").hotkey is None


def test_assign_hotkey_to_unknown_entry_raises_without_side_effects() -> None:
    reg = _registry(AppEntry("Safari", hotkey="s"))
    with pytest.raises(UnknownEntryError):
        reg.assign_hotkey("Firefox", None, "s")

    assert reg.find("Safari").hotkey == "s"
    assert _keys(reg) == [("Safari", None)]


def test_entry_for_hotkey_ignores_uninstalled_entries() -> None:
    reg = _registry(AppEntry("Safari", hotkey="s", installed=False))
    assert reg.entry_for_hotkey("s") is None
    reg.reconcile_installed_apps(["Safari"])
    assert reg.entry_for_hotkey("s").app_id == "Safari"


# ----------------------------
# reorder
# ----------------------------
def test_reorder_moves_forward_as_splice() -> None:
    reg = _registry(*(AppEntry(name) for name in ["A", "B", "C", "D"]))
    reg.reorder(("B", None), ("D", None))
    assert [e.app_id for e in reg.entries] == ["A", "C", "D", "B"]


def test_reorder_moves_backward_as_splice() -> None:
    reg = _registry(*(AppEntry(name) for name in ["A", "B", "C", "D"]))
    reg.reorder(("D", None), ("A", None))
    assert [e.app_id for e in reg.entries] == ["D", "A", "B", "C"]


def test_reorder_with_profile_keys() -> None:
    reg = _registry(
        AppEntry("Google Chrome", "Default"),
        AppEntry("Safari"),
        AppEntry("Google Chrome", "Profile 1"),
    )
    reg.reorder(("Google Chrome", "Profile 1"), ("Google Chrome", "Default"))
    assert _keys(reg) == [
        ("Google Chrome", "Profile 1"),
        ("Google Chrome", "Default"),
        ("Safari", None),
    ]


@pytest.mark.parametrize(
    ("source", "destination"),
    [(("Nope", None), ("A", None)), (("A", None), ("Nope", None)), (("A", "Profile 9"), ("B", None))],
)
def test_reorder_with_unknown_key_is_noop(source, destination) -> None:
    reg = _registry(AppEntry("A"), AppEntry("B"))
    reg.reorder(source, destination)
    assert [e.app_id for e in reg.entries] == ["A", "B"]


def test_no_event_sequence_deletes_keys() -> None:
    reg = _registry(AppEntry("A", hotkey="a"), AppEntry("B", "P1"), AppEntry("C"))
    before = set(_keys(reg))

    reg.reconcile_installed_apps(["D"])
    reg.reconcile_profiles([_profile("B", "P2")])
    reg.assign_hotkey("D", None, "a")
    reg.reorder(("D", None), ("A", None))
    reg.reconcile_installed_apps([])

    assert before <= set(_keys(reg))
    assert len(_keys(reg)) == len(set(_keys(reg)))


# ----------------------------
# snapshot / reset / scalars
# ----------------------------
def test_hydrate_replaces_everything_and_keeps_unknown_fields() -> None:
    reg = _registry(AppEntry("Old"))
    reg.hydrate({
        "version": 1,
        "apps": [{"app_id": "Safari", "profile_id": None, "hotkey": "s", "installed": True}],
        "is_setup": True,
        "height": 600,
        "support_message": -1,
        "theme": "dark",
    })

    assert _keys(reg) == [("Safari", None)]
    assert reg.is_setup is True
    out = reg.to_dict()
    assert out["height"] == 600
    assert out["support_message"] == -1
    assert out["theme"] == "dark"
    assert out["apps"][0]["hotkey"] == "s"


def test_to_dict_round_trips_through_from_dict() -> None:
    reg = _registry(AppEntry("Google Chrome", "Profile 1", hotkey="w", display_name="Work"))
    reg.mark_setup()
    reg.set_height(512)

    assert Registry.from_dict(reg.to_dict()).to_dict() == reg.to_dict()


def test_reset_returns_to_defaults() -> None:
    reg = _registry(AppEntry("Safari", hotkey="s"))
    reg.mark_setup()
    reg.set_height(700)
    reg.reset()

    assert reg.to_dict() == default_snapshot()
    assert reg.height == DEFAULT_HEIGHT


def test_snapshot_is_a_copy() -> None:
    reg = _registry(AppEntry("Safari"))
    snap = reg.snapshot()
    snap[0].hotkey = "z"
    assert reg.find("Safari").hotkey is None
