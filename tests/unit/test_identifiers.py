"""
File: tests/unit/test_identifiers.py
Description: 标识符生成工具单元测试

Created: 2026-03-02
"""

import re
from datetime import UTC, datetime

from inkwell.utils.identifiers import (
    BLOG_ID_SUFFIX_LENGTH,
    USERNAME_SUFFIX_LENGTH,
    derive_username,
    disambiguate_username,
    generate_blog_id,
    generate_upload_key,
    slugify_title,
)


def test_slugify_replaces_symbols_and_whitespace_runs() -> None:
    assert slugify_title("Hello World") == "hello-world"
    assert slugify_title("Hello, World!") == "hello-world"
    assert slugify_title("  Many   spaces\tand\nlines  ") == "many-spaces-and-lines"
    assert slugify_title("C++ & Rust: 2026") == "c-rust-2026"


def test_slugify_empty_title() -> None:
    assert slugify_title("") == ""
    assert slugify_title("!!!") == ""


def test_generate_blog_id_appends_random_suffix() -> None:
    blog_id = generate_blog_id("Hello World")

    assert re.fullmatch(rf"hello-world[a-z0-9]{{{BLOG_ID_SUFFIX_LENGTH}}}", blog_id)


def test_generate_blog_id_is_unique_for_same_title() -> None:
    ids = {generate_blog_id("Same Title") for _ in range(50)}

    assert len(ids) == 50


def test_derive_username_uses_local_part() -> None:
    assert derive_username("ada@x.com") == "ada"
    assert derive_username("first.last@example.org") == "first.last"


def test_disambiguate_username_adds_short_suffix() -> None:
    username = disambiguate_username("ada")

    assert username.startswith("ada")
    assert len(username) == len("ada") + USERNAME_SUFFIX_LENGTH


def test_generate_upload_key_format() -> None:
    moment = datetime(2026, 1, 1, tzinfo=UTC)

    key = generate_upload_key(moment)

    assert re.fullmatch(r"[a-z0-9]{21}-1767225600000\.jpeg", key)
    assert generate_upload_key(moment) != key
