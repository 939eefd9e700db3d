"""Reports gallery tab renderer."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from services.attachments import decode_preview
from services.reports_gallery import ReportsGallery


SimpleCallback = Callable[[], None]

_COLUMNS = 3


def render_tab(gallery: ReportsGallery, *, trigger_rerun: SimpleCallback) -> None:
    st.subheader("My Reports")
    reports = gallery.list()
    if not reports:
        st.caption("No reports yet. Images you send in the chat appear here.")
        return

    columns = st.columns(_COLUMNS)
    for index, report in enumerate(reports):
        with columns[index % _COLUMNS]:
            image = decode_preview(report.preview)
            if image is not None and report.preview.startswith("data:image"):
                st.image(image, width="stretch")
            else:
                st.markdown("📄")
            st.caption(report.name)
            if st.button("Delete", key=f"report_delete_{index}"):
                gallery.remove(index)
                trigger_rerun()
