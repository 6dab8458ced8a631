from pathlib import Path

import pytest

from specgraph.config import (
    Config,
    ConfigSourceName,
    ConfigValidationError,
    LogFormat,
    LogLevel,
    safe_load_config,
)
from tests.conftest import SpecProject


class TestFromDict:
    def test_defaults(self) -> None:
        config = Config.from_dict({})

        assert config.spec.specs_dir == "specs"
        assert config.spec.default_file == "README.md"
        assert config.spec.sequence_digits == 3
        assert config.spec.auto_check is True
        assert config.spec.include_archived is True
        assert config.spec.required_sections == []
        assert config.spec.check_heading_hierarchy is False
        assert (config.spec.warn_lines, config.spec.max_lines) == (300, 400)
        assert config.logging.level is LogLevel.INFO
        assert config.logging.format is LogFormat.JSON

    def test_overrides(self) -> None:
        config = Config.from_dict(
            {
                "spec": {"sequence_digits": 4, "required_fields": ["owner"], "max_lines": 600},
                "logging": {"format": "text"},
            }
        )

        assert config.spec.sequence_digits == 4
        assert config.spec.required_fields == ["owner"]
        assert config.spec.max_lines == 600
        assert config.logging.format is LogFormat.TEXT

    @pytest.mark.parametrize("digits", [0, 9, "three"])
    def test_invalid_sequence_digits(self, digits: object) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"spec": {"sequence_digits": digits}})

        assert exc_info.value.key == "spec.sequence_digits"
        assert exc_info.value.value == digits

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigValidationError, match="logging.level"):
            _ = Config.from_dict({"logging": {"level": "verbose"}})

    def test_unknown_keys_are_kept_but_ignored(self) -> None:
        config = Config.from_dict({"spec": {"colour": "blue"}})

        assert config.get("spec.colour") == "blue"

    def test_is_immutable(self) -> None:
        config = Config.from_dict({})

        with pytest.raises(ValueError, match="frozen"):
            config.spec.sequence_digits = 5  # pyright: ignore[reportAttributeAccessIssue]


class TestGet:
    def test_dotted_keys(self) -> None:
        config = Config.from_dict({"spec": {"specs_dir": "docs/specs"}})

        assert config.get("spec.specs_dir") == "docs/specs"
        assert config.get("logging.level") == "info"
        assert config.get("spec") == config.to_dict()["spec"]

    def test_default_for_missing_keys(self) -> None:
        config = Config.from_dict({})

        assert config.get("spec.nope") is None
        assert config.get("spec.specs_dir.deeper", "fallback") == "fallback"


class TestSerialization:
    def test_to_dict_without_defaults(self) -> None:
        config = Config.from_dict({"spec": {"sequence_digits": 4}})

        assert config.to_dict(include_defaults=False) == {"spec": {"sequence_digits": 4}}

    def test_to_dict_returns_a_copy(self) -> None:
        config = Config.from_dict({})

        data = config.to_dict()
        data["spec"]["specs_dir"] = "changed"

        assert config.get("spec.specs_dir") == "specs"

    def test_to_toml(self) -> None:
        config = Config.from_dict({"spec": {"sequence_digits": 4}})

        assert config.to_toml() == "[spec]\nsequence_digits = 4\n"

    def test_to_toml_with_defaults(self) -> None:
        text = Config.from_dict({}).to_toml(include_defaults=True)

        assert "[logging]" in text
        assert 'specs_dir = "specs"' in text


class TestFromFile:
    def test_reads_single_file(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        _ = path.write_text('[spec]\nspecs_dir = "rfcs"\n', encoding="utf-8")

        config = Config.from_file(path)

        assert config.spec.specs_dir == "rfcs"
        assert [source.path for source in config.sources] == [path]

    def test_invalid_value_names_the_file(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        _ = path.write_text("[spec]\nsequence_digits = 12\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_file(path)

        assert exc_info.value.source == str(path)


class TestLoad:
    def test_precedence(self, spec_project: SpecProject, monkeypatch: pytest.MonkeyPatch) -> None:
        _ = (spec_project.specgraph_dir / "specgraph.toml").write_text(
            '[spec]\nsequence_digits = 4\nspecs_dir = "docs"\n', encoding="utf-8"
        )
        _ = (spec_project.specgraph_dir / "specgraph.local.toml").write_text(
            '[spec]\nspecs_dir = "local-specs"\n', encoding="utf-8"
        )
        monkeypatch.setenv("SPECGRAPH_SPEC__AUTO_CHECK", "false")

        config = Config.load(
            project_root=spec_project.root,
            include_cli=True,
            cli_overrides={"logging": {"level": "debug"}},
        )

        assert config.spec.sequence_digits == 4
        assert config.spec.specs_dir == "local-specs"
        assert config.spec.auto_check is False
        assert config.logging.level is LogLevel.DEBUG

    def test_env_beats_project_file(
        self, spec_project: SpecProject, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _ = (spec_project.specgraph_dir / "specgraph.toml").write_text(
            "[spec]\nsequence_digits = 4\n", encoding="utf-8"
        )
        monkeypatch.setenv("SPECGRAPH_SPEC__SEQUENCE_DIGITS", "5")

        assert Config.load(project_root=spec_project.root).spec.sequence_digits == 5

    def test_sources_are_recorded(self, spec_project: SpecProject) -> None:
        config = Config.load(project_root=spec_project.root, include_env=False)

        assert [source.name for source in config.sources] == [
            ConfigSourceName.LOCAL,
            ConfigSourceName.PROJECT,
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]


class TestSafeLoadConfig:
    def test_returns_config_without_error(self, spec_project: SpecProject) -> None:
        config, error = safe_load_config(project_root=spec_project.root)

        assert error is None
        assert config.spec.sequence_digits == 3

    def test_broken_file_falls_back_to_defaults(
        self, spec_project: SpecProject, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _ = (spec_project.specgraph_dir / "specgraph.toml").write_text(
            "[spec\n", encoding="utf-8"
        )

        config, error = safe_load_config(project_root=spec_project.root)

        assert error is not None
        assert config.spec.sequence_digits == 3
        assert "Warning: Failed to load config:" in capsys.readouterr().err

    def test_strict_mode_exits(
        self, spec_project: SpecProject, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _ = (spec_project.specgraph_dir / "specgraph.toml").write_text(
            "[spec]\nsequence_digits = 0\n", encoding="utf-8"
        )
        monkeypatch.setenv("SPECGRAPH_STRICT_CONFIG", "1")

        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config(project_root=spec_project.root)

        assert exc_info.value.code == 1

    def test_explicit_missing_file_exits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            _ = safe_load_config(config_path=tmp_path / "missing.toml")

        assert "Config file not found" in capsys.readouterr().err

    def test_cli_overrides_apply(self, spec_project: SpecProject) -> None:
        config, _ = safe_load_config(
            project_root=spec_project.root, cli_overrides={"logging": {"level": "error"}}
        )

        assert config.logging.level is LogLevel.ERROR
