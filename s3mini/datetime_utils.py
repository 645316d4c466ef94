# -*- coding: utf-8 -*-
"""
s3mini.datetime_utils
~~~~~~~~~~~~~~~~~~~~~

Clock helpers for the ``Date`` request header.
"""

import datetime
from email.utils import format_datetime


def get_utc_datetime():
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def http_date(dt=None):
    """
    Format a datetime the way S3 expects the ``Date`` header.

    Args:
        dt (datetime, optional): Aware or naive-UTC datetime; now if omitted

    Returns:
        str: e.g. ``'Tue, 27 Mar 2007 19:36:42 GMT'``
    """
    if dt is None:
        dt = get_utc_datetime()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    else:
        dt = dt.astimezone(datetime.timezone.utc)
    return format_datetime(dt, usegmt=True)
