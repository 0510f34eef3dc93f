"""控制器层的异常。核心组件从不抛出这些异常，只返回 None/False。"""


class EmulatorError(Exception):
    """带 HTTP 风格状态码的错误，传输层据此生成响应。"""

    status_code = 500

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    def to_dict(self) -> dict:
        body: dict = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidRequestError(EmulatorError):
    status_code = 400


class SessionNotFoundError(EmulatorError):
    status_code = 404

    def __init__(self, message: str = "Bot session not found"):
        super().__init__(message)


class ProcessingError(EmulatorError):
    status_code = 500
