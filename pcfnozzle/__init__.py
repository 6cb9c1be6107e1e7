"""In-memory aggregation of firehose metrics and events, drained by harvests."""

__version__ = "2.10.0"