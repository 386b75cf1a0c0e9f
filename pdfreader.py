from pypdf import PdfReader
from pypdf.errors import PyPdfError
import logging
import re
from typing import List, Optional

from config import PDF_SUFFIX, TEXT_ENCODING

logger = logging.getLogger("app")


def _normalize(text: str) -> str:
    return re.sub(r'\s+', ' ', text).strip()


def parse_pdf_to_pages_text(file_path: str) -> Optional[List[str]]:
    """
    parses a PDF file and extracts text from each page.
    returns a list of strings, where each string is the text of a page.
    """
    pages_text_content = []
    try:
        reader = PdfReader(file_path)
        num_pages = len(reader.pages)
        logger.info(f"Extracting text from {num_pages} pages of {file_path}")
        for page in reader.pages:
            text = page.extract_text()
            # Image-only pages keep their slot so page numbers stay aligned
            pages_text_content.append(_normalize(text) if text else "")

    except FileNotFoundError:
        logger.error(f"PDF Document not found at {file_path}")
        return None
    except (PyPdfError, OSError) as e:
        logger.error(f"Error parsing PDF document '{file_path}': {e}")
        return None
    return pages_text_content


def read_text_file(file_path: str) -> Optional[List[str]]:
    """
    Reads a plain text file as a single page, keeping the text as is so
    match offsets refer to the file contents.
    """
    try:
        with open(file_path, "r", encoding=TEXT_ENCODING) as f:
            return [f.read()]
    except FileNotFoundError:
        logger.error(f"Text file not found at {file_path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading text file '{file_path}': {e}")
        return None


def load_document(file_path: str) -> Optional[List[str]]:
    """Load a document as a list of page texts, choosing the reader by suffix."""
    if file_path.lower().endswith(PDF_SUFFIX):
        return parse_pdf_to_pages_text(file_path)
    return read_text_file(file_path)
