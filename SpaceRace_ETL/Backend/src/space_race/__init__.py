"""Space launch CSV processing, aggregation and reporting."""
