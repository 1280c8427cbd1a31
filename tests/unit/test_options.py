import os

import pytest

from enro.application.options import EntropyRange, build_scan_options
from enro.config import Config


def test_parse_entropy_range():
    entropy_range = EntropyRange.parse("7.5-8.0")
    assert entropy_range == EntropyRange(7.5, 8.0)
    assert entropy_range.contains(7.5)
    assert entropy_range.contains(8.0)
    assert not entropy_range.contains(7.49)


@pytest.mark.parametrize("text", ["7.5", "abc-8", "8.0-7.5", "", "1-2-3"])
def test_parse_rejects_malformed_ranges(text):
    with pytest.raises(ValueError):
        EntropyRange.parse(text)


def test_build_scan_options_defaults(config_file):
    options = build_scan_options(Config(config_file))
    assert options.max_bytes == 1048576
    assert options.threads == (os.cpu_count() or 1)
    assert options.entropy_range is None
    assert options.show_progress is True


def test_zero_max_bytes_means_whole_file(config_file):
    config = Config(config_file)
    config.apply_overrides({"scan": {"max_bytes": 0, "threads": 3}})
    options = build_scan_options(config, EntropyRange(0.0, 1.0), show_progress=False)
    assert options.max_bytes is None
    assert options.threads == 3
    assert options.entropy_range == EntropyRange(0.0, 1.0)
    assert options.show_progress is False


def test_progress_disabled_by_config(config_file):
    config = Config(config_file)
    config.apply_overrides({"output": {"show_progress": False}})
    assert build_scan_options(config).show_progress is False
