"""tradermod — 트레이더 추가 예제 모드"""
__version__ = "0.1.0"
