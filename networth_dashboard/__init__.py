"""Net worth, cash flow and emergency fund runway dashboard."""
