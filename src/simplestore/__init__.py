"""SimpleStore — a small order-processing store served over resource fetches."""
