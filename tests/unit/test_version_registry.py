from __future__ import annotations

from pathlib import Path

import pytest

from services.versioning import VERSION_REGISTRY, iter_registry, synchronize

SAMPLES: dict[str, str] = {
    "README.md": (
        'implementation("com.caoccao.javet:swc4j:0.10.0")\n'
        "<version>0.10.0</version>\n"
        "https://repo1.maven.org/maven2/com/caoccao/javet/swc4j/0.10.0/\n"
        "Tested with Java 17 and 2024 releases.\n"
    ),
    "build.gradle.kts": 'object Config {\n    object Versions {\n        const val SWC4J = "0.10.0"\n    }\n}\n',
    "android/build.gradle.kts": 'const val SWC4J = "0.10.0-SNAPSHOT"\n',
    "docs/release_notes.md": "# Release Notes\n\n## 0.10.0 (unreleased)\n\n## 0.9.0\n",
    "rust/Cargo.toml": (
        '[package]\nname = "swc4j"\nversion = "0.10.0"\nedition = "2021"\n\n'
        '[dependencies]\njni = { version = "0.21.1" }\n\n'
        '[dependencies.serde]\nversion = "1.0.200"\n'
    ),
    "rust/Cargo.lock": (
        '[[package]]\nname = "serde"\nversion = "1.0.200"\n\n'
        '[[package]]\nname = "swc4j"\nversion = "0.10.0"\n'
    ),
    "rust/src/core.rs": "const VERSION: &'static str = \"0.10.0\";\n",
    "src/main/java/com/caoccao/javet/swc4j/Swc4jLibLoader.java": (
        '    private static final String LIB_VERSION = "0.10.0";\n'
    ),
    "src/test/java/com/caoccao/javet/swc4j/TestSwc4j.java": (
        '        assertEquals("0.10.0", swc4j.getVersion());\n'
    ),
}


@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    for relative, content in SAMPLES.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
    return tmp_path


def test_registry_paths_are_relative_and_unique() -> None:
    paths = [entry.file_path for entry in VERSION_REGISTRY]

    assert len(paths) == len(set(paths))
    assert all(not path.is_absolute() for path in paths)
    assert {path.as_posix() for path in paths} == set(SAMPLES)


def test_every_pattern_captures_a_version_group() -> None:
    for entry in iter_registry():
        assert entry.patterns
        for pattern in entry.patterns:
            assert "version" in pattern.groupindex


def test_iter_registry_preserves_order() -> None:
    assert tuple(iter_registry()) == VERSION_REGISTRY


def test_every_entry_matches_its_sample(sample_root: Path) -> None:
    report = synchronize("1.6.0", "1.7.0", root=sample_root)

    assert report.is_ok()
    assert all(result.written for result in report.results)
    assert report.results[0].rewritten == 3


def test_sync_rewrites_only_registered_tokens(sample_root: Path) -> None:
    synchronize("1.6.0", "1.7.0", root=sample_root)

    readme = (sample_root / "README.md").read_text(encoding="utf-8")
    cargo = (sample_root / "rust" / "Cargo.toml").read_text(encoding="utf-8")
    lock = (sample_root / "rust" / "Cargo.lock").read_text(encoding="utf-8")
    snapshot = (sample_root / "android" / "build.gradle.kts").read_text(encoding="utf-8")
    notes = (sample_root / "docs" / "release_notes.md").read_text(encoding="utf-8")

    assert "0.10.0" not in readme
    assert "2024" in readme and "Java 17" in readme
    assert 'version = "1.6.0"' in cargo
    assert 'version = "0.21.1"' in cargo
    assert 'version = "1.0.200"' in cargo
    assert lock.count('version = "1.0.200"') == 1
    assert lock.endswith('name = "swc4j"\nversion = "1.6.0"\n')
    assert snapshot == 'const val SWC4J = "1.7.0-SNAPSHOT"\n'
    assert "## 1.7.0 (unreleased)" in notes
    assert "## 0.9.0" in notes


def test_second_sync_is_a_no_op(sample_root: Path) -> None:
    synchronize("1.6.0", "1.7.0", root=sample_root)

    report = synchronize("1.6.0", "1.7.0", root=sample_root)

    assert report.files_written == 0
    assert all(result.rewritten == 0 for result in report.results)


def _cargo_entry():
    return next(entry for entry in VERSION_REGISTRY if entry.file_path.as_posix() == "rust/Cargo.toml")


def test_cargo_package_version_found_after_inline_arrays(tmp_path: Path) -> None:
    cargo = tmp_path / "rust" / "Cargo.toml"
    cargo.parent.mkdir(parents=True)
    cargo.write_bytes(
        b'[package]\nname = "swc4j"\nauthors = ["Sam Yang"]\nkeywords = ["swc", "jni"]\n'
        b'version = "0.10.0"\n\n[dependencies]\njni = { version = "0.21.1" }\n'
    )

    report = synchronize("1.6.0", "1.6.0", root=tmp_path, registry=(_cargo_entry(),))

    assert report.is_ok()
    assert cargo.read_bytes() == (
        b'[package]\nname = "swc4j"\nauthors = ["Sam Yang"]\nkeywords = ["swc", "jni"]\n'
        b'version = "1.6.0"\n\n[dependencies]\njni = { version = "0.21.1" }\n'
    )


def test_cargo_pattern_stops_at_next_table(tmp_path: Path) -> None:
    cargo = tmp_path / "rust" / "Cargo.toml"
    cargo.parent.mkdir(parents=True)
    original = b'[package]\nname = "swc4j"\n\n[dependencies.serde]\nversion = "1.0.200"\n'
    cargo.write_bytes(original)

    result = synchronize("1.6.0", "1.6.0", root=tmp_path, registry=(_cargo_entry(),)).results[0]

    assert result.rewritten == 0
    assert cargo.read_bytes() == original
