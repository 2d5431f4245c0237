"""運用向けユーティリティ"""
