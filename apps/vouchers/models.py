from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
import uuid


class VoucherStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


class Voucher(models.Model):
    """
    Payment voucher (comprovante) submitted by a participant.

    Approval converts the deposited amount into raffle numbers.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='vouchers'
    )
    raffle = models.ForeignKey(
        'raffles.Raffle',
        on_delete=models.CASCADE,
        related_name='vouchers'
    )

    # Amounts
    amount_informed = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    amount_read = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        help_text='Amount confirmed by the administrator'
    )
    discount_applied = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00')
    )
    coupon_code = models.CharField(max_length=50, blank=True)

    # Reference to the uploaded receipt (URL or storage key)
    image = models.TextField()

    # Review
    status = models.CharField(
        max_length=10,
        choices=VoucherStatus.choices,
        default=VoucherStatus.PENDING
    )
    admin_response = models.TextField(blank=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewed_vouchers'
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comprovantes'
        indexes = [
            models.Index(fields=['status', '-created_at'], name='comprovantes_status_idx'),
            models.Index(fields=['user', '-created_at'], name='comprovantes_user_idx'),
            models.Index(fields=['raffle', 'status'], name='comprovantes_raffle_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Voucher {self.amount_informed} by {self.user_id} ({self.status})"

    @property
    def base_amount(self):
        """Amount the numbers are computed from: verified if available."""
        return self.amount_read if self.amount_read is not None else self.amount_informed

    @property
    def effective_amount(self):
        return max(Decimal('0.00'), self.base_amount - self.discount_applied)
