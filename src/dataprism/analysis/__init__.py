"""Column analysis: type inference, statistics, temporal summaries, correlation."""
