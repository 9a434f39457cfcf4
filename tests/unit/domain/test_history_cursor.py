from src.domain.history_cursor import HistoryCursor


class TestHistoryCursor:
    """HistoryCursor 테스트"""

    def test_empty_history_starts_done(self):
        """빈 기록은 생성 즉시 종료 상태"""
        cursor = HistoryCursor([])

        assert cursor.is_done() is True
        assert cursor.current_item() == ""

        cursor.first()
        cursor.next()
        assert cursor.is_done() is True
        assert cursor.position == 0

    def test_missing_history_reference(self):
        """기록 참조가 없으면 빈 문자열"""
        cursor = HistoryCursor(None)

        assert cursor.is_done() is True
        assert cursor.current_item() == ""
        cursor.next()
        assert cursor.position == 0

    def test_walks_entries_in_order(self):
        history = ["Alice: hi", "Bob: hello"]
        cursor = HistoryCursor(history)

        assert cursor.current_item() == "Alice: hi"
        cursor.next()
        assert cursor.current_item() == "Bob: hello"
        cursor.next()
        assert cursor.is_done() is True

    def test_next_past_end_is_idempotent(self):
        """끝에서 next() 반복 호출해도 상태 유지"""
        cursor = HistoryCursor(["Alice: hi", "Bob: hello"])

        for _ in range(5):
            cursor.next()

        assert cursor.position == 2
        assert cursor.is_done() is True
        assert cursor.current_item() == ""

        cursor.first()
        assert cursor.is_done() is False
        assert cursor.current_item() == "Alice: hi"

    def test_sees_entries_appended_after_creation(self):
        """생성 이후 추가된 메시지도 보임 (스냅샷 아님)"""
        history = ["Alice: hi", "Bob: hello"]
        cursor = HistoryCursor(history)
        cursor.next()

        history.append("Charlie: welcome")

        seen = []
        while not cursor.is_done():
            seen.append(cursor.current_item())
            cursor.next()

        assert seen == ["Bob: hello", "Charlie: welcome"]

    def test_exhausted_cursor_reactivates_on_growth(self):
        """끝에 도달한 뒤 기록이 늘어나면 다시 진행 가능"""
        history = ["Alice: hi"]
        cursor = HistoryCursor(history)
        cursor.next()
        assert cursor.is_done() is True

        history.append("Bob: hello")

        assert cursor.is_done() is False
        assert cursor.current_item() == "Bob: hello"

    def test_independent_cursors(self):
        history = ["Alice: hi", "Bob: hello"]
        first = HistoryCursor(history)
        second = HistoryCursor(history)

        first.next()

        assert first.current_item() == "Bob: hello"
        assert second.current_item() == "Alice: hi"

    def test_iterates_remaining_entries(self):
        cursor = HistoryCursor(["a: 1", "b: 2", "c: 3"])
        cursor.next()

        assert list(cursor) == ["b: 2", "c: 3"]
        assert cursor.is_done() is True

