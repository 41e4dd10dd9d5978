from __future__ import annotations

import pytest

from cli import resolve_chip

CHIPS = ["Can you help me book a service?", "What services do you offer?", "Where do you operate?"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#2", "What services do you offer?"),
        (" # 1 ", "Can you help me book a service?"),
        ("#3", "Where do you operate?"),
    ],
)
def test_hash_number_picks_chip(raw, expected):
    assert resolve_chip(raw, CHIPS) == expected


@pytest.mark.parametrize("raw", ["2", "221", "#9", "#0", "#x", "#", "I live at #2 Elm St"])
def test_other_input_is_a_message(raw):
    assert resolve_chip(raw, CHIPS) is None


def test_no_chips_means_no_pick():
    assert resolve_chip("#1", []) is None
