# Fleet API database models
# Import all models here for SQLAlchemy discovery

from fleet_api.models.brand import Brand         # noqa
from fleet_api.models.driver import Driver       # noqa
from fleet_api.models.vehicle import Vehicle     # noqa
from fleet_api.models.usage import Usage         # noqa
