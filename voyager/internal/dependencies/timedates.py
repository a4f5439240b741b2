from datetime import datetime
import pytz


def get_utc_now() -> datetime:
  """Current UTC time without tzinfo, the form every TIMESTAMP column stores."""
  return datetime.now(pytz.utc).replace(tzinfo=None)
