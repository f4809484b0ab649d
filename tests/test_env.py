import os

import pytest

from scavenger_hunt.utils import env as env_module


def _unset_tracked(monkeypatch, name: str) -> None:
    # setenv first so monkeypatch removes whatever load_env writes later
    monkeypatch.setenv(name, '')
    monkeypatch.delenv(name)


def test_load_env_reads_selected_file(tmp_path, monkeypatch):
    (tmp_path / 'pyproject.toml').write_text('')
    (tmp_path / '.env.prod').write_text('SCAVENGER_PROGRESS_KEY=from-prod\n')
    monkeypatch.setattr(env_module, '_find_project_root', lambda: tmp_path)
    monkeypatch.setenv('ENV', 'production')
    monkeypatch.delenv('ENV_FILE', raising=False)
    _unset_tracked(monkeypatch, 'SCAVENGER_PROGRESS_KEY')

    path = env_module.load_env()

    assert path == tmp_path / '.env.prod'
    assert os.environ['SCAVENGER_PROGRESS_KEY'] == 'from-prod'
    assert env_module.progress_key() == 'from-prod'


def test_load_env_falls_back_to_dotenv(tmp_path, monkeypatch):
    (tmp_path / '.env').write_text('SCAVENGER_STRICT=yes\n')
    monkeypatch.setattr(env_module, '_find_project_root', lambda: tmp_path)
    monkeypatch.delenv('ENV_FILE', raising=False)
    monkeypatch.delenv('ENV', raising=False)
    monkeypatch.delenv('PYTHON_ENV', raising=False)
    _unset_tracked(monkeypatch, 'SCAVENGER_STRICT')

    env_module.load_env()

    assert env_module.strict_mode() is True


def test_defaults_without_environment(monkeypatch):
    for name in ('SCAVENGER_STORE', 'SCAVENGER_PROGRESS_KEY', 'SCAVENGER_STRICT'):
        monkeypatch.delenv(name, raising=False)

    assert env_module.store_backend() == 'sqlite'
    assert env_module.progress_key() == 'seattle_scavenger_hunt_progress'
    assert env_module.strict_mode() is False


def test_store_backend_rejects_unknown(monkeypatch):
    monkeypatch.setenv('SCAVENGER_STORE', 'Floppy')
    with pytest.raises(ValueError):
        env_module.store_backend()


def test_find_project_root_finds_marker(tmp_path):
    (tmp_path / 'pyproject.toml').write_text('')
    nested = tmp_path / 'a' / 'b'
    nested.mkdir(parents=True)
    assert env_module._find_project_root(nested) == tmp_path
