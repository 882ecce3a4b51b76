"""Shared constants for bookclub sync."""

import re

# Placeholder Notion uses for an empty leader/host field
UNSPECIFIED = "未指定"

# Period number embedded in a book title, e.g. "第12期 ..."
PERIOD_PATTERN = re.compile(r"第(\d+)期")

# Local storage files
SCHEDULE_FILENAME = "book-schedule.json"
LEADERS_FILENAME = "leaders.json"

# Notion database property names
NOTION_TITLE_PROPERTY = "书名"
NOTION_DATE_PROPERTY = "排期"
NOTION_LEADER_PROPERTY = "领读人"
NOTION_HOST_PROPERTY = "主持人"
