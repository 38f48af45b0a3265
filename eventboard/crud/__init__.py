# eventboard/crud/__init__.py

from .crud_user import user
from .crud_session import session
from .crud_organizer import organizer
from .crud_category import category
from .crud_event import event
from .crud_agenda import agenda
from .crud_speaker import speaker
from .crud_faq import faq
from .crud_attachment import attachment
from .crud_comment import comment
from .crud_analytics import analytics
