from django.db import models


class ResponseFilter(models.TextChoices):
    DEFAULT = "default", "Inbox"
    SPAM = "spam", "Spam"
    UNREAD = "unread", "Unread"
    STARRED = "starred", "Starred"


class OrderDirection(models.TextChoices):
    ASC = "asc", "Ascending"
    DESC = "desc", "Descending"


class BulkAction(models.TextChoices):
    DELETE = "delete", "Delete"
    UNDELETE = "undelete", "Undelete"
    FLAG = "flag", "Flag"
