class VoiceSynthesisError(Exception):
    """TTS API 호출 실패 (키 누락, 2xx 이외 응답 등)"""

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
