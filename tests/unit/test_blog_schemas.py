"""
File: tests/unit/test_blog_schemas.py
Description: 博客提交模型单元测试 (草稿/发布拆分)

Created: 2026-03-02
"""

import pytest

from inkwell.core.exceptions import ValidationException
from inkwell.domains.blogs.schemas import (
    BlogCreateRequest,
    DraftSubmission,
    PublishSubmission,
)


def test_draft_flag_selects_submission_variant() -> None:
    draft = BlogCreateRequest(title="T", draft=True).to_submission()
    publish = BlogCreateRequest(title="T", draft=False).to_submission()
    missing_flag = BlogCreateRequest(title="T", draft=None).to_submission()

    assert isinstance(draft, DraftSubmission)
    assert isinstance(publish, PublishSubmission)
    assert isinstance(missing_flag, PublishSubmission)
    assert draft.draft is True
    assert publish.draft is False


def test_tags_are_lowercased() -> None:
    submission = BlogCreateRequest(tags=["Python", "FASTAPI"]).to_submission()

    assert submission.tags == ["python", "fastapi"]


def test_content_extra_fields_are_kept() -> None:
    request = BlogCreateRequest.model_validate(
        {"content": {"time": 1700000000, "version": "2.28", "blocks": [{"id": "a"}]}}
    )

    submission = request.to_submission()

    assert submission.content.model_dump() == {
        "time": 1700000000,
        "version": "2.28",
        "blocks": [{"id": "a"}],
    }


def test_draft_check_accepts_empty_submission() -> None:
    DraftSubmission().check()


def test_publish_check_reports_first_failing_rule() -> None:
    submission = PublishSubmission(title="T", des="", banner="", tags=[])

    with pytest.raises(ValidationException) as exc_info:
        submission.check()

    assert exc_info.value.message == (
        "You must provide blog description under 200 characters !"
    )


def test_publish_check_accepts_complete_submission() -> None:
    PublishSubmission.model_validate(
        {
            "title": "T",
            "des": "d",
            "banner": "b",
            "tags": ["x"],
            "content": {"blocks": [{}]},
        }
    ).check()
