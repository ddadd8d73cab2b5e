"""
File: inkwell/domains/blogs/constants.py
Description: 博客领域常量定义 (错误码 + 发布规则)
Namespace: blogs.*

Created: 2026-03-02
"""

from starlette.status import (
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from inkwell.core.error_code import BaseErrorCode

# 最新列表固定返回条数 (无分页)
LATEST_BLOGS_LIMIT = 5

DESCRIPTION_MAX_LENGTH = 200
TAGS_MAX_COUNT = 30

# slug 冲突时的最大写入次数 (含首次)
MAX_BLOG_ID_ATTEMPTS = 3


class BlogErrorCode(BaseErrorCode):
    """
    博客领域错误定义
    Tuple Structure: (HTTP_Status, Code_String, Default_Message)
    """

    # HTTP 403: 发布校验失败 (草稿不校验)
    TITLE_REQUIRED = (
        HTTP_403_FORBIDDEN,
        "blogs.title_required",
        "You must provide a title to publish the blog !",
    )
    DESCRIPTION_INVALID = (
        HTTP_403_FORBIDDEN,
        "blogs.description_invalid",
        "You must provide blog description under 200 characters !",
    )
    BANNER_REQUIRED = (
        HTTP_403_FORBIDDEN,
        "blogs.banner_required",
        "You must provide a blog banner !",
    )
    CONTENT_REQUIRED = (
        HTTP_403_FORBIDDEN,
        "blogs.content_required",
        "There must be some content to publish the blog !",
    )
    TAGS_INVALID = (
        HTTP_403_FORBIDDEN,
        "blogs.tags_invalid",
        "Provide tags in order to publish the blog, max limit is 30 !",
    )

    BLOG_NOT_FOUND = (HTTP_404_NOT_FOUND, "blogs.not_found", "Blog not found")

    BLOG_ID_EXHAUSTED = (
        HTTP_409_CONFLICT,
        "blogs.blog_id_exhausted",
        "Could not allocate a unique blog id, please try again",
    )

    # 博客已写入，作者 total_posts 更新失败
    TOTAL_POSTS_UPDATE_FAILED = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "blogs.total_posts_update_failed",
        "Failed to update total posts number !",
    )
