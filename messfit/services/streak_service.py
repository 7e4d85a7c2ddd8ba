"""
Streak Service

Counts consecutive logging days from the distinct date keys of a user's
meal logs.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from sqlalchemy import distinct

from messfit.extensions import db
from messfit.models.meal_log import MealLog
from messfit.utils import date_keys


def current_streak(dates: Iterable[str], now: Optional[datetime] = None) -> int:
    """
    Consecutive days ending today, or yesterday when today has no log yet.

    A single missed day (today) is forgiven; two missed days reset to 0.
    """
    logged = set(dates)
    today = date_keys.today(now)
    yesterday = date_keys.days_ago(1, now)

    if today in logged:
        anchor = today
    elif yesterday in logged:
        anchor = yesterday
    else:
        return 0

    streak = 0
    while anchor in logged:
        streak += 1
        anchor = date_keys.shift_key(anchor, -1)
    return streak


def longest_streak(dates: Iterable[str]) -> int:
    ordered = sorted(set(dates))
    if not ordered:
        return 0

    longest = run = 1
    for previous, key in zip(ordered, ordered[1:]):
        if date_keys.shift_key(previous, 1) == key:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
    return longest


def streak_message(streak: int) -> str:
    if streak == 0:
        return "Start your streak today!"
    if streak == 1:
        return "Great start! Keep going!"
    if streak < 7:
        return "You're on fire!"
    if streak < 30:
        return "Incredible consistency!"
    return "You're a legend!"


def calculate_streaks(dates: Iterable[str], now: Optional[datetime] = None) -> Dict[str, object]:
    dates = set(dates)
    current = current_streak(dates, now)
    return {
        "current_streak": current,
        "longest_streak": max(longest_streak(dates), current),
        "days_logged": len(dates),
        "message": streak_message(current),
    }


def user_log_dates(user_id: int):
    rows = db.session.query(distinct(MealLog.date)).filter(MealLog.user_id == user_id).all()
    return {row[0] for row in rows}


def get_user_streaks(user_id: int, now: Optional[datetime] = None) -> Dict[str, object]:
    return calculate_streaks(user_log_dates(user_id), now)
