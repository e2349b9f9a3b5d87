"""Services — imperative shell around the pure core (persistence boundary)."""
