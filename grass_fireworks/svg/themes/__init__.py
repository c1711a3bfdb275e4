"""Per-theme level composers."""
