"""Message consumers built on Subscription."""
