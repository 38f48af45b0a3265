# eventboard/models/__init__.py
# Import all models so Base.metadata knows every table before create_all()
# and relationship() strings resolve.

from eventboard.db.base_class import Base
from eventboard.models.user import User
from eventboard.models.session import Session
from eventboard.models.organizer import Organizer
from eventboard.models.category import Category
from eventboard.models.event import Event
from eventboard.models.agenda import Agenda
from eventboard.models.speaker import Speaker
from eventboard.models.faq import Faq
from eventboard.models.attachment import Attachment
from eventboard.models.comment import Comment
