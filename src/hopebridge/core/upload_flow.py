# hopebridge/core/upload_flow.py
"""
成绩单上传页面的调用方逻辑

- 没有选择文件或正在校验时，校验动作不可用
- 校验通过: complete_verification()，并在延迟后自动回到学生主页
- 校验不通过: 停留在当前页面并保留原因，可以重新选择文件再试
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from hopebridge.core.controller import SessionController
from hopebridge.core.errors import NavigationError, ValidationError
from hopebridge.domain import MarksUpload, Screen, VerificationOutcome

logger = logging.getLogger(__name__)

DEFAULT_AUTO_RETURN_DELAY = 2.5


class DocumentVerifier(Protocol):
    async def verify(self, document: bytes, mime_type: str) -> VerificationOutcome:
        ...


class UploadFlow:
    """上传页面状态：待校验文件、加载标记、最近一次结论"""

    def __init__(
        self,
        controller: SessionController,
        verifier: DocumentVerifier,
        *,
        auto_return_delay: float = DEFAULT_AUTO_RETURN_DELAY,
    ):
        self.controller = controller
        self.verifier = verifier
        self.auto_return_delay = auto_return_delay

        self.upload: Optional[MarksUpload] = None
        self.outcome: Optional[VerificationOutcome] = None
        self.is_loading = False
        # 自动返回任务；用户提前离开页面时不会取消
        self.pending_return: Optional[asyncio.Task] = None

    def select_file(self, data: bytes, mime_type: str, filename: str = "") -> MarksUpload:
        """选择新文件，清空上一次的结论"""
        self.upload = MarksUpload(data=data, mime_type=mime_type, filename=filename)
        self.outcome = None
        return self.upload

    @property
    def can_verify(self) -> bool:
        return self.upload is not None and not self.is_loading

    async def verify(self, *, auto_return: bool = True) -> VerificationOutcome:
        """
        对已选文件发起一次校验

        Args:
            auto_return: 通过后是否由本对象调度自动返回；
                HTTP 层改用后台任务调度时传 False

        Raises:
            ValidationError: 未选择文件或已有校验在进行中
        """
        if self.upload is None:
            raise ValidationError(message="No document selected")
        if self.is_loading:
            raise ValidationError(message="Verification already in progress")

        self.is_loading = True
        try:
            outcome = await self.verifier.verify(self.upload.data, self.upload.mime_type)
        finally:
            self.is_loading = False

        self.outcome = outcome
        if outcome.is_valid:
            self.controller.complete_verification()
            if auto_return:
                self.pending_return = asyncio.get_running_loop().create_task(self.return_to_dashboard())
        else:
            logger.info(f"[{self.controller.session_id}] 校验未通过: {outcome.reason}")
        return outcome

    async def return_to_dashboard(self) -> None:
        """延迟后回到学生主页"""
        await asyncio.sleep(self.auto_return_delay)
        try:
            self.controller.navigate(Screen.STUDENT_DASHBOARD)
        except NavigationError as e:
            # 严格导航下用户已离开上传页
            logger.warning(f"[{self.controller.session_id}] 自动返回被拒绝: {e}")


__all__ = ["UploadFlow", "DocumentVerifier"]
