"""Dashboard aggregation response schemas."""

import datetime

from tracker.schemas.common import CamelModel


class CountItem(CamelModel):
    name: str
    value: int


class PageViewStats(CamelModel):
    total: int = 0
    unique: int = 0
    avg_per_day: float = 0
    views_per_visit: float = 0
    duration: float = 0  # minutes per session
    bounce_rate: float = 0  # percent


class DailyPageViews(CamelModel):
    date: datetime.date
    views: int
    unique: int


class PageViewsResponse(CamelModel):
    stats: PageViewStats
    daily: list[DailyPageViews] = []
    routes: list[CountItem] = []


class VoteStats(CamelModel):
    total_votes: int = 0
    votes_per_day: float = 0
    votes_per_visitor: float = 0
    amount_of_votes: float = 0
    amount_of_spectators: float = 0
    lowest_vote_avg: float = 0
    vote_avg: float = 0
    highest_vote_avg: float = 0
    duration: float = 0  # seconds per round


class AggregatedVisitorInfo(CamelModel):
    country_counts: list[CountItem] = []
    region_counts: list[CountItem] = []
    city_counts: list[CountItem] = []
    os_counts: list[CountItem] = []
    device_counts: list[CountItem] = []
    browser_counts: list[CountItem] = []
