"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- the root package exposes reader, writer, converter and core types
- visually.api is self-contained
- importing the package does not configure logging
"""

import logging


def test_root_exports():
    import visually

    for name in visually.__all__:
        assert hasattr(visually, name), name

    assert callable(visually.parse_visual_file)
    assert callable(visually.from_image_urls)
    assert callable(visually.validate)
    assert isinstance(visually.Presentation, type)


def test_error_hierarchy():
    from visually import MalformedInputError, SchemaViolationError, VisualFileError

    assert issubclass(MalformedInputError, VisualFileError)
    assert issubclass(SchemaViolationError, VisualFileError)
    assert issubclass(VisualFileError, ValueError)


def test_api_module_works_independently(sample_path):
    from visually.api import ValidationResult, parse_visual_file, validate

    result = validate(path=sample_path)
    assert isinstance(result, ValidationResult)
    assert parse_visual_file(sample_path.read_text(encoding="utf-8")).title == "Field trip"


def test_import_has_no_logging_side_effects():
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    import visually  # noqa: F401
    import visually.builder  # noqa: F401
    assert root.handlers == handlers_before
