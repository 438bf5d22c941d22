"""Property-based tests for discovery invariants.

Verifies that:
- Distro filters never keep a directory whose path their rule excludes.
- Every kept candidate points at ``<dir>/bin/java`` of an input directory.
- ``find_all`` never returns two installations with the same path.
- ``find_all`` is idempotent on an unchanged filesystem.
- ``read_release`` returns the first ``JAVA_VERSION`` value, unquoted.
"""
from __future__ import annotations

import io
import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from javainfo.core.version import UNKNOWN_VERSION, read_release
from javainfo.discovery.finder import JavaFinder
from javainfo.discovery.linux import EXCLUSION_RULES, filter_jvm_dirs, list_subdirectories

from tests.discovery.helpers import (
    FakeRunner,
    create_jdk,
    create_package_manager,
    linux_config,
    release_text,
)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

dir_names = st.lists(
    st.text(
        alphabet=st.sampled_from("abcdefjlnortuv-0123456789"),
        min_size=1,
        max_size=20,
    ).filter(lambda s: s not in {".", ".."}),
    min_size=0,
    max_size=8,
    unique=True,
)

managers = st.sampled_from(sorted(EXCLUSION_RULES))

versions = st.from_regex(r"[0-9]{1,2}\.[0-9]{1,2}\.[0-9]{1,2}", fullmatch=True)

other_keys = st.lists(
    st.sampled_from(["OS_NAME", "OS_ARCH", "IMPLEMENTOR", "SOURCE", "MODULES"]),
    max_size=5,
)


def _build_root(root: Path, names: list[str], with_bin: list[bool]) -> None:
    for name, has_bin in zip(names, with_bin):
        (root / name).mkdir()
        if has_bin:
            (root / name / "bin").mkdir()


# ---------------------------------------------------------------------------
# Distro filter
# ---------------------------------------------------------------------------


class TestFilterProperties:
    """The exclusion rule is honoured for arbitrary directory names."""

    @given(names=dir_names, manager=managers, data=st.data())
    @settings(max_examples=60, deadline=None)
    def test_excluded_names_never_kept(self, names, manager, data) -> None:
        with_bin = data.draw(st.lists(st.booleans(), min_size=len(names), max_size=len(names)))
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_root(root, names, with_bin)
            found = filter_jvm_dirs(list_subdirectories(root), manager)
            kept = {Path(j.path).parent.parent.name for j in found}

            marker = EXCLUSION_RULES[manager]
            expected = {
                n for n, b in zip(names, with_bin)
                if b and (marker is None or marker not in str(root / n))
            }
            assert kept == expected
            for java in found:
                assert java.path.endswith(str(Path("bin") / "java"))
                assert java.version == ""


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class TestFindAllProperties:
    """Set semantics of the full discovery pipeline."""

    @given(names=dir_names, manager=managers, version=versions)
    @settings(max_examples=30, deadline=None)
    def test_unique_paths_and_idempotent(self, names, manager, version) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp)
            jvm_root = base / "usr" / "lib" / "jvm"
            jvm_root.mkdir(parents=True)
            create_package_manager(base / "usr" / "bin", manager)
            for name in names:
                create_jdk(jvm_root, name, release_text(version))

            finder = JavaFinder(linux_config(base), FakeRunner())
            first = finder.find_all()
            second = finder.find_all()

            paths = [j.path for j in first]
            assert len(paths) == len(set(paths))
            assert sorted((j.path, j.version) for j in first) == sorted(
                (j.path, j.version) for j in second
            )
            assert all(j.version == version for j in first)


# ---------------------------------------------------------------------------
# Release file scanning
# ---------------------------------------------------------------------------


class TestReadReleaseProperties:
    """Token extraction is independent of surrounding lines."""

    @given(before=other_keys, after=other_keys, version=versions, quoted=st.booleans())
    def test_first_version_line_wins(self, before, after, version, quoted) -> None:
        value = f'"{version}"' if quoted else version
        lines = [f'{k}="x"' for k in before]
        lines.append(f"JAVA_VERSION={value}")
        lines.extend(f'{k}="y"' for k in after)
        lines.append('JAVA_VERSION="0.0.0"')
        assert read_release(io.StringIO("\n".join(lines) + "\n")) == version

    @given(keys=other_keys)
    def test_terminated_without_token_is_unknown(self, keys) -> None:
        text = "".join(f'{k}="x"\n' for k in keys)
        assert read_release(io.StringIO(text)) == UNKNOWN_VERSION
