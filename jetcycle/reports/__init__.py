"""Report generation for JetCycle."""
