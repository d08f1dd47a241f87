from django.db import models


class PaymentType(models.TextChoices):
    SALE = "SALE", "Sale"
    FREE = "FREE", "Free"
    RENT = "RENT", "Rent"


class EscrowType(models.TextChoices):
    NOP = "NOP", "No escrow"
    MAD = "MAD", "Mutually assured destruction"
    MAD_CT = "MAD_CT", "MAD with confidential transactions"
    MULTISIG = "MULTISIG", "Multisig"


class Currency(models.TextChoices):
    BITCOIN = "BITCOIN", "Bitcoin"
    PARTICL = "PARTICL", "Particl"


class CryptocurrencyAddressType(models.TextChoices):
    NORMAL = "NORMAL", "Normal"
    STEALTH = "STEALTH", "Stealth"
