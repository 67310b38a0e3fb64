# tests/conftest.py
import pytest
import structlog

from borr.catalog import clear_cache
from borr.expanders import default_registry
from borr.language import Language

SAMPLE_LANGUAGE = """\
# Sample language file used across the test suite.
lang_id   = "en_GB"
lang_desc = "English (United Kingdom)"
lang_ver  = "1.2.3"
unknown_global = "ignored"

[normal_tests]
greeting = "Hello, world!" # trailing comment
hashtag  = "this # is inside quotes"
empty    = ""
copyright_info[] = "Copyright line one."
copyright_info[] = "Copyright line two."

[variables_tests]
reference = "${normal_tests:greeting}"
library   = "Parsed by ${lib}"
unknown   = "[${not_a_variable}]"
"""


@pytest.fixture(autouse=True)
def _isolate_process_state():
    """Registry callbacks, cached languages and logging config are process-wide."""
    yield
    default_registry.clear_callbacks()
    clear_cache()
    structlog.reset_defaults()


@pytest.fixture
def sample_text():
    return SAMPLE_LANGUAGE


@pytest.fixture
def sample_language(sample_text):
    return Language.from_string(sample_text)


@pytest.fixture
def lang_dir(tmp_path):
    """
    Creates a temporary language directory with two language files
    and one unrelated file.
    """
    (tmp_path / "en_GB.borr").write_text(SAMPLE_LANGUAGE, encoding="utf-8")
    (tmp_path / "de_DE.lang").write_text(
        'lang_id = "de_DE"\nlang_desc = "Deutsch"\nlang_ver = "0.1.0"\n\n'
        '[normal_tests]\ngreeting = "Hallo, Welt!"\n',
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not a language file", encoding="utf-8")
    return tmp_path
