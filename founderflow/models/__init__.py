# Models package - registers every table with SQLModel
from founderflow.models.entry import Entry
from founderflow.models.outreach import OutreachRecord
from founderflow.models.profile import UserProfile
from founderflow.models.subscription import Subscription
