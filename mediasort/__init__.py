"""
Mediasort - Media collection organization tool.

Organizes photos and videos by:
- Resolving an acquisition date from EXIF, video metadata or file timestamps
- Building a YYYY/MM_MON destination for each file
- Moving files with pre and post verification (or simulating in dry-run)
"""

__version__ = "0.1.0"
