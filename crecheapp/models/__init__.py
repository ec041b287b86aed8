# Importa todos os modelos para registrar as tabelas em Base.metadata
# antes que as migrações chamem create_all.

from crecheapp.models.student import Student  # noqa: F401
from crecheapp.models.teacher import Teacher  # noqa: F401
from crecheapp.models.school_class import SchoolClass, ClassStudent  # noqa: F401
from crecheapp.models.record import DailyRecord  # noqa: F401
from crecheapp.models.event import CalendarEvent  # noqa: F401
from crecheapp.models.announcement import Announcement, AnnouncementRecipient, Draft  # noqa: F401
from crecheapp.models.session import LoginSession, TermsAcceptance  # noqa: F401
