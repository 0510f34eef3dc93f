"""Telegram 风格的数据结构与请求载荷校验。

字段名沿用 Bot API（message_id、from、reply_to_message 等），
这样序列化出来的 JSON 与真实平台保持一致。校验规则在模型上声明，
控制器层只需 model_validate 即可拒绝非法输入。
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from botemu.utils.helpers import MAX_TEXT_LENGTH

BOT_TOKEN_PATTERN = r"^\d+:[A-Za-z0-9_-]{35,}$"
USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"

ChatType = Literal["private", "group", "supergroup", "channel"]

T = TypeVar("T")


class TelegramModel(BaseModel):
    """类说明：TelegramModel。"""

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """按 Bot API 字段名导出，省略空字段。"""
        return self.model_dump(by_alias=True, exclude_none=True)


class User(TelegramModel):
    """类说明：User。"""
    id: int = Field(gt=0)
    is_bot: bool
    first_name: str = Field(min_length=1, max_length=64)
    last_name: str | None = Field(default=None, max_length=64)
    username: str | None = Field(default=None, min_length=5, max_length=32, pattern=USERNAME_PATTERN)
    language_code: str | None = Field(default=None, min_length=2, max_length=2)


class Chat(TelegramModel):
    """类说明：Chat。"""
    id: int
    type: ChatType
    title: str | None = Field(default=None, max_length=255)
    username: str | None = Field(default=None, min_length=5, max_length=32, pattern=USERNAME_PATTERN)
    first_name: str | None = Field(default=None, max_length=64)
    last_name: str | None = Field(default=None, max_length=64)


class MessageEntity(TelegramModel):
    """类说明：MessageEntity。"""
    type: str
    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    url: str | None = None
    user: User | None = None


class Message(TelegramModel):
    """单条消息；追加到会话后不再修改。"""
    message_id: int = Field(gt=0)
    from_: User | None = Field(default=None, alias="from")
    date: int = Field(gt=0)  # unix 秒
    chat: Chat
    text: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)
    entities: list[MessageEntity] | None = None
    reply_to_message: "Message | None" = None


class Update(TelegramModel):
    """推送给订阅方的外层信封，只包一条消息。"""
    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None
    edited_channel_post: Message | None = None


class BotConfigPayload(BaseModel):
    """创建机器人会话时的请求体。"""
    token: str = Field(pattern=BOT_TOKEN_PATTERN)
    username: str = Field(min_length=5, max_length=32, pattern=USERNAME_PATTERN)
    webhook_url: str | None = Field(default=None, pattern=r"^[a-zA-Z][a-zA-Z0-9+.-]*://\S+$")
    allowed_updates: list[str] | None = None


class ApiResponse(BaseModel, Generic[T]):
    """Bot API 风格的响应包装：ok 为 False 时带 error_code 与 description。"""
    ok: bool
    result: T | None = None
    error_code: int | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """函数说明：to_dict。"""
        return self.model_dump(by_alias=True, exclude_none=True)


Message.model_rebuild()
