from django.conf import settings
from django.db import models
import uuid


class RaffleNumber(models.Model):
    """A raffle number (numero da rifa) issued to a participant."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='raffle_numbers'
    )
    raffle = models.ForeignKey(
        'raffles.Raffle',
        on_delete=models.CASCADE,
        related_name='numbers'
    )
    voucher = models.ForeignKey(
        'vouchers.Voucher',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='numbers'
    )
    number = models.CharField(max_length=5)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'numeros_rifa'
        constraints = [
            models.UniqueConstraint(
                fields=['raffle', 'number'],
                name='unique_number_per_raffle'
            ),
        ]
        indexes = [
            models.Index(fields=['user', 'raffle'], name='numeros_user_raffle_idx'),
        ]
        ordering = ['raffle', 'number']

    def __str__(self):
        return f"{self.number} ({self.raffle_id})"
