"""
scaffoldkit test suite
======================

Test Modules
------------
- test_generator.py: Template discovery, single file and bulk generation
- test_controller.py: Overwrite prompting and guarded removal
- test_filesystem.py: Local file system capability
- test_rendering.py: Identity and Jinja2 render functions
- test_models.py: Configuration models and config files
- test_cli.py: Command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Skip the end-to-end CLI tests
    pytest -m "not integration"

    # Run specific test class
    pytest tests/test_generator.py::TestGenerateAll
"""
