"""
Contract tests for KISS / KISS2 composition.
A valid composite must:
- Export the concatenation of its component states
- Combine component outputs with the fixed formula
- Keep components independent: perturbing one lane changes the output
  but leaves every other component's state identical to a control run
- Jump every component by the same distance
"""

import pytest

from kissjump import KISS, KISS2, MWC2, MWC64, SHR3, Cong

SEED = (2247183469, 99545079, 3269400377, 3950144837)


def build_components(cls, seed):
    mwc_cls = cls.components[0]
    return mwc_cls(seed[:2]), Cong(seed[2:3]), SHR3(seed[3:4])


def component_states(cls, state):
    out, start = [], 0
    for part in cls.components:
        size = len(part.state_widths)
        out.append(state[start:start + size])
        start += size
    return out


def test_components(composite_cls):
    assert composite_cls.components[1:] == (Cong, SHR3)
    assert composite_cls.components[0] in (MWC2, MWC64)


def test_state_is_concatenation(composite_cls):
    rng = composite_cls(SEED)
    parts = build_components(composite_cls, SEED)
    assert rng.get_state() == sum((p.get_state() for p in parts), ())


def test_kiss_output_formula():
    rng = KISS(SEED)
    mwc, cong, shr3 = build_components(KISS, SEED)
    for _ in range(20):
        expected = ((mwc.next() ^ cong.next()) + shr3.next()) % 2**32
        assert rng.next() == expected


def test_kiss2_output_formula():
    rng = KISS2(SEED)
    mwc, cong, shr3 = build_components(KISS2, SEED)
    for _ in range(20):
        expected = (mwc.next() + cong.next() + shr3.next()) % 2**32
        assert rng.next() == expected


@pytest.mark.parametrize("lane", [0, 1, 2, 3])
def test_perturbing_one_lane_isolated(composite_cls, lane):
    control = composite_cls(SEED)
    perturbed_seed = list(SEED)
    perturbed_seed[lane] ^= 1
    perturbed = composite_cls(perturbed_seed)

    control_out = [control.next() for _ in range(20)]
    perturbed_out = [perturbed.next() for _ in range(20)]
    assert control_out != perturbed_out

    # MWC owns seed words 0-1, Cong word 2, SHR3 word 3.
    touched = 0 if lane < 2 else lane - 1
    control_parts = component_states(composite_cls, control.get_state())
    perturbed_parts = component_states(composite_cls, perturbed.get_state())
    for i, (a, b) in enumerate(zip(control_parts, perturbed_parts)):
        if i == touched:
            assert a != b
        else:
            assert a == b


def test_jump_moves_every_component(composite_cls):
    rng = composite_cls(SEED)
    parts = build_components(composite_cls, SEED)
    rng.jump(123456789)
    for part in parts:
        part.jump(123456789)
    assert rng.get_state() == sum((p.get_state() for p in parts), ())


def test_period_is_lcm_of_components(composite_cls):
    for part_cls in composite_cls.components:
        assert composite_cls.period % part_cls.period == 0


def test_int_seed_deals_words_in_order():
    rng = KISS(0x00000004_00000003_00000002_00000001)
    assert rng.get_state() == MWC2((1, 2)).get_state() + (3, 4)
