from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
import uuid

# Raffle numbers are rendered as zero-padded 5-digit strings
NUMBER_WIDTH = 5
MAX_RAFFLE_NUMBER = 10 ** NUMBER_WIDTH - 1


class RaffleStatus(models.TextChoices):
    OPEN = 'open', 'Open'
    CLOSED = 'closed', 'Closed'


class ResultType(models.TextChoices):
    MANUAL = 'manual', 'Manual'
    AUTO = 'auto', 'Automatic'
    FEDERAL = 'federal', 'Federal lottery'


class Raffle(models.Model):
    """A raffle (sorteio): numbers are sold into it and winners drawn from it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    status = models.CharField(
        max_length=10,
        choices=RaffleStatus.choices,
        default=RaffleStatus.OPEN
    )

    # Schedule
    start_date = models.DateTimeField(default=timezone.now)
    end_date = models.DateTimeField(null=True, blank=True)
    draw_date = models.DateTimeField(null=True, blank=True)

    # Media
    video_link = models.TextField(blank=True)
    banner_image = models.TextField(blank=True)

    # Number range configuration
    total_numbers = models.PositiveIntegerField(
        default=1000,
        validators=[MinValueValidator(1)]
    )
    min_number = models.PositiveIntegerField(
        default=1,
        validators=[MaxValueValidator(MAX_RAFFLE_NUMBER)]
    )
    max_number = models.PositiveIntegerField(
        default=MAX_RAFFLE_NUMBER,
        validators=[MinValueValidator(1), MaxValueValidator(MAX_RAFFLE_NUMBER)]
    )

    # Draw outcome
    winning_numbers = models.JSONField(default=list, blank=True)
    result_type = models.CharField(max_length=10, choices=ResultType.choices, blank=True)

    configuration = models.JSONField(default=dict, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sorteios'
        indexes = [
            models.Index(fields=['status'], name='sorteios_status_idx'),
            models.Index(fields=['created_at'], name='sorteios_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.status})"

    @property
    def is_open(self):
        return self.status == RaffleStatus.OPEN

    @property
    def capacity(self):
        """Numbers that can ever be issued: the configured total, bounded by the range."""
        range_size = max(0, self.max_number - self.min_number + 1)
        return min(self.total_numbers, range_size)

    def total_winners(self):
        """Sum of prize slots; a raffle without prizes still draws one winner."""
        total = sum(prize.number_count for prize in self.prizes.all())
        return total or 1


class Prize(models.Model):
    """A prize slot (premio) awarding ``number_count`` winning numbers."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    raffle = models.ForeignKey(
        Raffle,
        on_delete=models.CASCADE,
        related_name='prizes'
    )
    name = models.CharField(max_length=200)
    number_count = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)]
    )
    order = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'premios'
        ordering = ['order', 'created_at']

    def __str__(self):
        return f"{self.order}. {self.name} x{self.number_count}"

    @property
    def is_main(self):
        return self.order == 1
