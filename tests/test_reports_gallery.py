from local_store import MemoryStore
from models import Report
from services.attachments import encode_attachment
from services.reports_gallery import ReportsGallery
from services.session_store import SessionStore


def test_add_prepends_newest_first_in_selection_order():
    session = SessionStore(MemoryStore())
    gallery = ReportsGallery(session)
    gallery.add([encode_attachment("old.png", b"o")])

    gallery.add([encode_attachment("a.png", b"a"), encode_attachment("b.png", b"b")])

    assert [report.name for report in gallery.list()] == ["a.png", "b.png", "old.png"]
    assert gallery.list()[0].preview.startswith("data:image/png;base64,")
    assert session.reports() == gallery.list()


def test_add_nothing_is_a_no_op():
    gallery = ReportsGallery(SessionStore(MemoryStore()))

    assert gallery.add([]) == []
    assert gallery.list() == []


def test_remove_by_index():
    session = SessionStore(MemoryStore())
    session.save_reports([Report("a", "p1"), Report("b", "p2"), Report("a", "p1")])
    gallery = ReportsGallery(session)

    assert gallery.remove(1)
    assert [report.name for report in gallery.list()] == ["a", "a"]
    assert not gallery.remove(5)
    assert not gallery.remove(-1)
    assert len(gallery.list()) == 2
