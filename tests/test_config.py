import textwrap

import pytest

from confirm_keys.config import ConfigError, load_config


# TRIVIAL: mirrors dataclass defaults; kept for documentation.
def test_load_config_defaults_when_missing(tmp_path):
    config = load_config(tmp_path)

    assert config.path is None
    assert config.windows.interrupt_ms == 500
    assert config.windows.cancel_ms == 1200
    assert config.windows.cancel_seconds == 1.2
    assert config.hints.cancel_working_message == "Working... · Esc again aborts"
    assert config.theme == {"warning": "bold yellow", "dim": "dim"}


def test_load_config_reads_fields(tmp_path):
    config_file = tmp_path / "confirm-keys.toml"
    config_file.write_text(
        textwrap.dedent(
            """
            [windows]
            interrupt_ms = 800
            cancel_ms = 2000

            [hints]
            interrupt_label = "Input cleared"

            [theme]
            warning = "bold red"
            accent = "cyan"
            """
        ).strip()
    )

    config = load_config(tmp_path)

    assert config.path == config_file
    assert config.windows.interrupt_seconds == 0.8
    assert config.windows.cancel_ms == 2000
    assert config.hints.interrupt_label == "Input cleared"
    assert config.hints.interrupt_instruction == " · Ctrl-C again exits"
    assert config.theme == {"warning": "bold red", "dim": "dim", "accent": "cyan"}


@pytest.mark.parametrize(
    "body",
    [
        "[windows]\ninterrupt_ms = 0",
        "[windows]\ncancel_ms = \"fast\"",
        "[windows]\ncancel_ms = true",
        "[hints]\nstatus_key = 3",
        "[theme]\nwarning = 1",
        "[windows\n",
    ],
)
def test_load_config_rejects_bad_values(tmp_path, body):
    (tmp_path / "confirm-keys.toml").write_text(body)

    with pytest.raises(ConfigError):
        load_config(tmp_path)
