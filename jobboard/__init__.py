"""Job board messaging and notification service.

The package is organised in layers: ``domain`` holds plain entities and
rules, ``infrastructure`` the SQLAlchemy persistence and realtime plumbing,
``application`` the use cases, ``interfaces`` the FastAPI surface and
``client`` the polling client consumed by the UI.
"""
