"""카탈로그 소스 조회 백그라운드 워커."""

from PySide6.QtCore import QObject, Signal

from src.services.movie_source_service import MovieSourceService


class MovieSourceWorker(QObject):
    """QThread + moveToThread 패턴으로 카탈로그 API 호출을 백그라운드 처리한다."""

    finished = Signal(object)  # MovieSource
    error    = Signal(str)

    def __init__(self, movie_id: str, service: MovieSourceService) -> None:
        super().__init__()
        self._movie_id = movie_id
        self._service  = service
        self._cancelled = False

    def cancel(self) -> None:
        """작업 취소 플래그 설정 (진행 중인 HTTP 요청은 중단 불가)."""
        self._cancelled = True

    def run(self) -> None:
        """백그라운드 스레드에서 실행된다."""
        try:
            source = self._service.fetch_movie(self._movie_id)
            if not self._cancelled:
                self.finished.emit(source)
        except Exception as e:
            if not self._cancelled:
                self.error.emit(str(e))
