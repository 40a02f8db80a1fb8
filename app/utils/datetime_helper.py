"""날짜·시간 헬퍼 함수 (KST 기준)"""
from datetime import date, datetime, timezone, timedelta
from typing import Optional

# 한국 표준시 (UTC+9)
KST = timezone(timedelta(hours=9))

WEEKDAY_KO = ["월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일"]


def now_kst() -> datetime:
    """Current time in KST"""
    return datetime.now(timezone.utc).astimezone(KST)


def to_kst(dt: datetime) -> datetime:
    """Naive datetimes are taken as KST already"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=KST)
    return dt.astimezone(KST)


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a client supplied datetime to UTC.

    Args:
        dt: datetime (naive values are interpreted as KST wall-clock time)

    Returns:
        UTC datetime, or None when dt is None
    """
    if dt is None:
        return None
    return to_kst(dt).astimezone(timezone.utc)


def ensure_aware(dt: datetime) -> datetime:
    """Attach KST to naive values so they can be compared with aware ones"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=KST)
    return dt


def format_datetime_ko(dt: datetime) -> str:
    """
    datetime을 한국어 형식으로 변환

    Returns:
        str: "2024년 1월 1일 (월요일) 오전 10시 30분" 형식의 문자열
    """
    dt = to_kst(dt)

    hour = dt.hour
    if hour < 12:
        period = "오전"
        display_hour = hour if hour != 0 else 12
    else:
        period = "오후"
        display_hour = hour - 12 if hour != 12 else 12

    return (
        f"{dt.year}년 {dt.month}월 {dt.day}일 "
        f"({WEEKDAY_KO[dt.weekday()]}) "
        f"{period} {display_hour}시 {dt.minute:02d}분"
    )


def combine_due(due_date: date, due_time: Optional[str]) -> datetime:
    """Join a parsed date and "HH:MM" time into a naive KST datetime (09:00 when no time)"""
    hours, minutes = (due_time or "09:00").split(":")
    return datetime(due_date.year, due_date.month, due_date.day, int(hours), int(minutes))
