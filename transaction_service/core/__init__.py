"""Cross-cutting application concerns: settings, logging, metrics, wiring."""
