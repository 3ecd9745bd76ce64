"""Query logging: sinks, deferred dispatch, and statistics."""

from holonet.querylog.dispatcher import DeferredLogDispatcher
from holonet.querylog.sinks import DatabaseSink, LoggingSink, LogSink
from holonet.querylog.statistics import QueryStatisticsJob, latest_statistics

__all__ = [
    "DatabaseSink",
    "DeferredLogDispatcher",
    "LogSink",
    "LoggingSink",
    "QueryStatisticsJob",
    "latest_statistics",
]
