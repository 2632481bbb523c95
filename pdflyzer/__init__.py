"""
PDFlyzer Package.

Upload PDF files, search them for several literal terms at once, review
each match in context and on the rendered page, annotate matches and
export them to CSV through a Streamlit web interface.
"""

__version__ = "1.0.0"
