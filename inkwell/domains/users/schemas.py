"""
File: inkwell/domains/users/schemas.py
Description: 用户领域 Pydantic 模型 (Schema)

作者公开信息视图，嵌入到博客详情/列表响应中：
    {"personal_info": {"fullname": ..., "username": ..., "profile_img": ...}}

邮箱、密码哈希、聚合计数属于私有字段，不出现在任何响应模型里。

Created: 2025-11-25
Updated: 2026-03-02 (Public author view)
"""

from pydantic import BaseModel, ConfigDict, Field

from inkwell.db.models.user import User


class AuthorPersonalInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    fullname: str = Field(..., description="作者全名")
    username: str = Field(..., description="作者用户名 (唯一)")
    profile_img: str | None = Field(default=None, description="头像 URL")


class AuthorView(BaseModel):
    """
    作者公开视图。
    """

    personal_info: AuthorPersonalInfo

    @classmethod
    def from_user(cls, user: User) -> "AuthorView":
        return cls(personal_info=AuthorPersonalInfo.model_validate(user))
