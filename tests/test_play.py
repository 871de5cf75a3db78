import pytest

import play


def test_headless_prints_one_frame_per_tick(capsys):
    play.main(["--headless", "--ticks", "3", "--field-size", "5", "--seed", "1"])
    out = capsys.readouterr().out
    # Each frame is five rows plus the blank line print() adds.
    assert len(out.splitlines()) == 3 * 6


def test_rejects_non_positive_interval():
    with pytest.raises(SystemExit):
        play.parse_args(["--interval-ms", "0"])


def test_defaults():
    args = play.parse_args([])
    assert args.field_size == 30
    assert args.interval_ms == 250
    assert not args.headless
