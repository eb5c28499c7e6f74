"""
Tests for content generation — templates, markdown escaping, file writes.

Pure unit tests except for ``create_file_from_scratch``, which writes
into tmp_path.
"""

import asyncio
from pathlib import Path

import pytest

from reinit.core.errors import WriteFailure
from reinit.core.services.generators.content import create_file_from_scratch, materialize
from reinit.core.services.generators.gitignore import GITIGNORE_TEMPLATE
from reinit.core.services.generators.license import LICENSE_TEMPLATE, render_license
from reinit.core.services.generators.markdown import escape_markdown_code_blocks
from reinit.core.services.generators.readme import README_TEMPLATE


# ═══════════════════════════════════════════════════════════════════
#  escape_markdown_code_blocks
# ═══════════════════════════════════════════════════════════════════


class TestEscapeMarkdownCodeBlocks:
    def test_converts_every_fence(self):
        text = "'''bash\nls\n'''\n\n'''py\nx = 1\n'''"
        out = escape_markdown_code_blocks(text)
        assert "'''" not in out
        assert out.count("```") == 4

    def test_idempotent(self):
        once = escape_markdown_code_blocks("'''sh\necho hi\n'''")
        assert escape_markdown_code_blocks(once) == once

    def test_no_fences_unchanged(self):
        text = "# Title\n\nIt's a 'quoted' word and ''two'' quotes."
        assert escape_markdown_code_blocks(text) == text

    def test_readme_template_uses_placeholders(self):
        assert "'''bash" in README_TEMPLATE
        assert "```" not in README_TEMPLATE


# ═══════════════════════════════════════════════════════════════════
#  materialize
# ═══════════════════════════════════════════════════════════════════


class TestMaterialize:
    def test_readme_is_escaped(self):
        content = materialize("md:README").decode("utf-8")
        assert content == escape_markdown_code_blocks(README_TEMPLATE)
        assert "```bash" in content

    def test_license(self):
        content = materialize("md:LICENSE").decode("utf-8")
        assert content == render_license()
        assert content.startswith("MIT License")
        assert "{year}" not in content

    def test_gitignore(self):
        assert materialize("git:gitignore") == GITIGNORE_TEMPLATE.encode("utf-8")

    def test_unknown_type_placeholder(self):
        assert materialize("cfg:knip") == b"// Auto-generated file for type: cfg:knip"

    def test_selection_is_exact_match(self):
        """Content keys are case-sensitive, unlike the registry lookup."""
        assert materialize("MD:readme") == b"// Auto-generated file for type: MD:readme"

    def test_explicit_content_wins(self):
        assert materialize("md:README", "hello\n") == b"hello\n"

    def test_empty_explicit_content_uses_template(self):
        assert materialize("md:README", "") == materialize("md:README")


class TestRenderLicense:
    def test_fills_placeholders(self):
        text = render_license(year=2020, holder="Ada")
        assert "Copyright (c) 2020 Ada" in text
        assert LICENSE_TEMPLATE.count("{year}") == 1


# ═══════════════════════════════════════════════════════════════════
#  create_file_from_scratch
# ═══════════════════════════════════════════════════════════════════


class TestCreateFileFromScratch:
    def test_creates_parent_dirs(self, tmp_path: Path):
        dest = tmp_path / "a" / "b" / ".gitignore"
        asyncio.run(create_file_from_scratch(dest, "git:gitignore"))
        assert dest.read_text(encoding="utf-8") == GITIGNORE_TEMPLATE

    def test_overwrites(self, tmp_path: Path):
        dest = tmp_path / "README.md"
        dest.write_text("old")
        asyncio.run(create_file_from_scratch(dest, "md:README", "new"))
        assert dest.read_text() == "new"

    def test_write_failure(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a dir")
        with pytest.raises(WriteFailure) as exc:
            asyncio.run(create_file_from_scratch(blocker / "README.md", "md:README"))
        assert str(blocker / "README.md") in str(exc.value)
