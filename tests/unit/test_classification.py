from pathlib import Path

import pytest

from enro.domain.classification import (
    BINARY,
    ENCRYPTED,
    PLAIN_TEXT,
    RANDOM,
    Category,
    Classification,
    FileAnalysis,
)

pytestmark = pytest.mark.unit


def test_labelled_categories_require_a_label():
    with pytest.raises(ValueError):
        Classification(Category.ARCHIVE)
    with pytest.raises(ValueError):
        Classification(Category.IMAGE, "")


def test_unlabelled_categories_reject_a_label():
    with pytest.raises(ValueError):
        Classification(Category.ENCRYPTED, "AES")


def test_display_names():
    assert Classification.archive("ZIP").display_name == "Archive (ZIP)"
    assert Classification.document("PDF").display_name == "Document (PDF)"
    assert RANDOM.display_name == "Random Data"
    assert PLAIN_TEXT.display_name == "Plain Text"
    assert str(ENCRYPTED) == "Encrypted"


def test_short_names():
    assert Classification.image("PNG").short_name == "Image(PNG)"
    assert RANDOM.short_name == "Random"
    assert PLAIN_TEXT.short_name == "PlainText"
    assert BINARY.short_name == "Binary"


def test_classifications_are_values():
    assert Classification.archive("ZIP") == Classification(Category.ARCHIVE, "ZIP")
    assert Classification.archive("ZIP") != Classification.archive("RAR")
    assert len({ENCRYPTED, Classification(Category.ENCRYPTED)}) == 1


def test_file_analysis_to_dict():
    record = FileAnalysis(Path("dir/a.zip"), Classification.archive("ZIP"), 7.5, 10, 10)
    assert record.to_dict() == {
        "path": str(Path("dir/a.zip")),
        "category": "archive",
        "label": "ZIP",
        "type": "Archive (ZIP)",
        "entropy": 7.5,
        "size": 10,
        "bytes_analyzed": 10,
    }
