from .crud_event_child import CRUDEventChild
from eventboard.models.comment import Comment

comment = CRUDEventChild(Comment, "Comment")
