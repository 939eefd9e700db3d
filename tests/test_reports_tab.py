from contextlib import contextmanager

from local_store import MemoryStore
from models import Report
from services.reports_gallery import ReportsGallery
from services.session_store import SessionStore
from tabs import reports as reports_tab


class _StStub:
    def __init__(self, pressed=()) -> None:
        self.pressed = set(pressed)
        self.images: list[dict] = []
        self.captions: list[str] = []

    def subheader(self, text):
        pass

    def caption(self, text):
        self.captions.append(text)

    def markdown(self, text):
        pass

    def columns(self, count):
        return [self._column() for _ in range(count)]

    @contextmanager
    def _column(self):
        yield

    def image(self, image, **kwargs):
        self.images.append(kwargs)

    def button(self, label, key=None):
        return key in self.pressed


def test_report_images_stretch_to_column_width(monkeypatch):
    session = SessionStore(MemoryStore())
    session.save_reports([Report(name="scan.png", preview="data:image/png;base64,iVBORw0KGgo=")])
    stub = _StStub()
    monkeypatch.setattr(reports_tab, "st", stub)

    reports_tab.render_tab(ReportsGallery(session), trigger_rerun=lambda: None)

    assert stub.images == [{"width": "stretch"}]
    assert stub.captions == ["scan.png"]


def test_delete_button_removes_report_and_reruns(monkeypatch):
    session = SessionStore(MemoryStore())
    session.save_reports([Report(name="scan.png", preview="data:image/png;base64,iVBORw0KGgo=")])
    stub = _StStub(pressed={"report_delete_0"})
    reruns = []
    monkeypatch.setattr(reports_tab, "st", stub)

    reports_tab.render_tab(ReportsGallery(session), trigger_rerun=lambda: reruns.append(True))

    assert session.reports() == []
    assert reruns == [True]
