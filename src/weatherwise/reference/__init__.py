"""Static weather constants.

Reference data that doesn't change with API calls: decision thresholds and
weather-code lookup tables.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from weatherwise.reference.weather_codes import WMO_TAGS as WMO_TAGS
from weatherwise.reference.weather_codes import ForecastTag as ForecastTag
