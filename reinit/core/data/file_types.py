"""
Known file types and their acceptable on-disk names.
"""

from __future__ import annotations

from reinit.core.models.file_type import FileTypeDescriptor

FILE_TYPES: tuple[FileTypeDescriptor, ...] = (
    FileTypeDescriptor(type="cfg:eslint", variations=("eslint.config.js",)),
    FileTypeDescriptor(type="cfg:knip", variations=("knip.json",)),
    FileTypeDescriptor(type="cfg:reliverse", variations=("reliverse.jsonc", "reliverse.ts")),
    FileTypeDescriptor(type="cfg:package.json", variations=("package.json",)),
    FileTypeDescriptor(type="cfg:tsconfig.json", variations=("tsconfig.json",)),
    FileTypeDescriptor(type="git:gitattributes", variations=(".gitattributes",)),
    FileTypeDescriptor(type="git:gitignore", variations=(".gitignore",)),
    FileTypeDescriptor(type="md:LICENSE", variations=("LICENSE.md", "LICENSE")),
    FileTypeDescriptor(type="md:README", variations=("README.md",)),
)
