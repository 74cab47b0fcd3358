# Data models for tool contracts and response envelopes
