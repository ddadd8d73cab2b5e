"""
File: inkwell/domains/blogs/schemas.py
Description: 博客领域 Pydantic 模型 (Schema)

本模块定义了博客相关的输入/输出数据结构：
1. BlogCreateRequest: 创建请求原始参数，按 draft 标志拆分为两种提交
2. DraftSubmission / PublishSubmission: 草稿与正式发布，各自持有校验规则
3. BlogSummary / BlogDetail: 列表与详情视图 (嵌入作者公开信息)
4. 各端点的响应包装 ({"id"}, {"blogs"}, {"blog"})

规范：
- 时间字段对外序列化为 publishedAt
- 标签统一转为小写

Created: 2026-03-02
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inkwell.core.exceptions import ValidationException
from inkwell.db.models.blog import Blog
from inkwell.domains.blogs.constants import (
    DESCRIPTION_MAX_LENGTH,
    TAGS_MAX_COUNT,
    BlogErrorCode,
)
from inkwell.domains.users.schemas import AuthorView

# ------------------------------------------------------------------------------
# Input Schemas (输入模型)
# ------------------------------------------------------------------------------


class BlogContent(BaseModel):
    """
    结构化正文，只约束 blocks 为列表，其余字段 (time, version ...) 原样保留。
    """

    model_config = ConfigDict(extra="allow")

    blocks: list[dict[str, Any]] = Field(default_factory=list)


class BlogSubmission(BaseModel):
    """
    博客提交基类，子类决定是否为草稿以及需要满足的校验规则。
    """

    draft: ClassVar[bool]

    title: str = ""
    des: str = ""
    banner: str = ""
    tags: list[str] = Field(default_factory=list)
    content: BlogContent = Field(default_factory=BlogContent)

    @field_validator("tags")
    @classmethod
    def lowercase_tags(cls, v: list[str]) -> list[str]:
        return [tag.lower() for tag in v]

    def check(self) -> None:
        """校验提交内容，失败时抛出 ValidationException"""


class DraftSubmission(BlogSubmission):
    """草稿：不做任何字段校验，不出现在公开列表"""

    draft: ClassVar[bool] = True


class PublishSubmission(BlogSubmission):
    """正式发布：全部字段必须满足发布规则"""

    draft: ClassVar[bool] = False

    def check(self) -> None:
        """
        按顺序校验，第一条失败的规则生效。
        """
        if not self.title:
            raise ValidationException(BlogErrorCode.TITLE_REQUIRED)
        if not self.des or len(self.des) > DESCRIPTION_MAX_LENGTH:
            raise ValidationException(BlogErrorCode.DESCRIPTION_INVALID)
        if not self.banner:
            raise ValidationException(BlogErrorCode.BANNER_REQUIRED)
        if not self.content.blocks:
            raise ValidationException(BlogErrorCode.CONTENT_REQUIRED)
        if not self.tags or len(self.tags) > TAGS_MAX_COUNT:
            raise ValidationException(BlogErrorCode.TAGS_INVALID)


class BlogCreateRequest(BaseModel):
    """
    创建博客请求参数 (POST /create-blog)。
    """

    title: str = ""
    des: str = ""
    banner: str = ""
    tags: list[str] = Field(default_factory=list)
    content: BlogContent = Field(default_factory=BlogContent)
    draft: bool | None = False

    def to_submission(self) -> DraftSubmission | PublishSubmission:
        fields = self.model_dump(exclude={"draft"})
        if self.draft:
            return DraftSubmission.model_validate(fields)
        return PublishSubmission.model_validate(fields)


class GetBlogRequest(BaseModel):
    blog_id: str = ""


# ------------------------------------------------------------------------------
# Output Schemas (输出/响应模型)
# ------------------------------------------------------------------------------


class BlogActivity(BaseModel):
    total_reads: int = 0


class BlogSummary(BaseModel):
    """
    列表视图 (最新博客)。
    """

    model_config = ConfigDict(populate_by_name=True)

    blog_id: str
    title: str
    des: str
    banner: str
    activity: BlogActivity
    tags: list[str]
    published_at: datetime = Field(..., alias="publishedAt")
    author: AuthorView

    @classmethod
    def _view_fields(cls, blog: Blog) -> dict[str, Any]:
        return {
            "blog_id": blog.blog_id,
            "title": blog.title,
            "des": blog.des,
            "banner": blog.banner,
            "activity": BlogActivity(total_reads=blog.total_reads),
            "tags": list(blog.tags),
            "published_at": blog.published_at,
            "author": AuthorView.from_user(blog.author),
        }

    @classmethod
    def from_model(cls, blog: Blog) -> "BlogSummary":
        """要求 blog.author 已预加载"""
        return cls(**cls._view_fields(blog))


class BlogDetail(BlogSummary):
    """
    详情视图，在列表视图基础上附带正文。
    """

    content: dict[str, Any]

    @classmethod
    def from_model(cls, blog: Blog) -> "BlogDetail":
        return cls(**cls._view_fields(blog), content=dict(blog.content))


class CreateBlogResponse(BaseModel):
    id: str = Field(..., description="新博客的 blog_id (slug)")


class LatestBlogsResponse(BaseModel):
    blogs: list[BlogSummary]


class BlogDetailResponse(BaseModel):
    blog: BlogDetail
