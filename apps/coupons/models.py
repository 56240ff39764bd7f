from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
import uuid


class CouponType(models.TextChoices):
    QUANTITY = 'quantity', 'Bonus numbers'
    PERCENTAGE = 'percentage', 'Percentage discount'


class Coupon(models.Model):
    """
    Promotional coupon (cupom) applied to a voucher.

    ``quantity`` coupons add ``value`` bonus numbers on approval;
    ``percentage`` coupons discount ``value`` percent of the deposited amount.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=50, unique=True)
    coupon_type = models.CharField(
        max_length=12,
        choices=CouponType.choices,
        default=CouponType.QUANTITY
    )
    value = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    is_active = models.BooleanField(default=True)
    expires_at = models.DateTimeField(null=True, blank=True)
    max_uses = models.PositiveIntegerField(null=True, blank=True)
    current_uses = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cupons'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.code} ({self.coupon_type}: {self.value})"

    def save(self, *args, **kwargs):
        self.code = self.code.strip().upper()
        super().save(*args, **kwargs)

    @property
    def is_expired(self):
        return self.expires_at is not None and self.expires_at <= timezone.now()

    @property
    def is_exhausted(self):
        return self.max_uses is not None and self.current_uses >= self.max_uses
