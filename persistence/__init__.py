from .journal import SessionJournal, ensure_dir
from .org_writer import OrgLogWriter, format_record

__all__ = ["OrgLogWriter", "SessionJournal", "ensure_dir", "format_record"]
