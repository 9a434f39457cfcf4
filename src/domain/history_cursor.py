import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class HistoryCursor:
    """
    채팅 기록 순회용 커서 (읽기 전용)

    방의 기록 리스트를 복사하지 않고 참조하므로, 생성 이후 추가된
    메시지도 아직 지나치지 않은 위치라면 보인다.
    원본 방이 사라진 뒤의 사용은 보장하지 않는다.
    """

    def __init__(self, history: list[str] | None):
        self._history = history
        self._position = 0

        logger.debug(
            f"[HistoryCursor] Created for chat history with {len(history or [])} messages"
        )

    @property
    def position(self) -> int:
        return self._position

    def first(self) -> None:
        """처음 위치로 이동"""
        self._position = 0
        logger.debug("[HistoryCursor] Reset to first element")

    def next(self) -> None:
        """다음 위치로 이동 (끝이면 무시)"""
        if self.is_done():
            logger.debug("[HistoryCursor] Already at end - cannot move next")
            return

        self._position += 1
        logger.debug(f"[HistoryCursor] Moved to index {self._position}")

    def is_done(self) -> bool:
        """현재 기록 길이 기준으로 끝인지 판단"""
        if self._history is None:
            return True
        return self._position >= len(self._history)

    def current_item(self) -> str:
        """현재 항목 반환 (끝이면 빈 문자열)"""
        if self.is_done():
            logger.debug("[HistoryCursor] No current item available")
            return ""
        return self._history[self._position]

    def __iter__(self) -> Iterator[str]:
        while not self.is_done():
            item = self.current_item()
            self.next()
            yield item

