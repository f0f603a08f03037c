from __future__ import annotations

from enum import Enum

from moneyvalue.domain.errors import UnknownCurrencyError

# Scale used by units that define no fixed subdivision (XDR, precious metals, ...).
# Persisted amounts depend on it: do not change.
FALLBACK_SCALE = 6


class Currency(str, Enum):
    """
    Every ISO 4217 code in use (plus the few still accepted for settlement,
    e.g. ANG, SLL, ZWL), as of the 2025 amendment list.

    The enum is the process-wide currency table: members are singletons,
    so `a is b` is the currency identity used by Money.
    """
    AED = "AED"
    AFN = "AFN"
    ALL = "ALL"
    AMD = "AMD"
    ANG = "ANG"
    AOA = "AOA"
    ARS = "ARS"
    AUD = "AUD"
    AWG = "AWG"
    AZN = "AZN"
    BAM = "BAM"
    BBD = "BBD"
    BDT = "BDT"
    BGN = "BGN"
    BHD = "BHD"
    BIF = "BIF"
    BMD = "BMD"
    BND = "BND"
    BOB = "BOB"
    BOV = "BOV"
    BRL = "BRL"
    BSD = "BSD"
    BTN = "BTN"
    BWP = "BWP"
    BYN = "BYN"
    BZD = "BZD"
    CAD = "CAD"
    CDF = "CDF"
    CHE = "CHE"
    CHF = "CHF"
    CHW = "CHW"
    CLF = "CLF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    COU = "COU"
    CRC = "CRC"
    CUC = "CUC"
    CUP = "CUP"
    CVE = "CVE"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ERN = "ERN"
    ETB = "ETB"
    EUR = "EUR"
    FJD = "FJD"
    FKP = "FKP"
    GBP = "GBP"
    GEL = "GEL"
    GHS = "GHS"
    GIP = "GIP"
    GMD = "GMD"
    GNF = "GNF"
    GTQ = "GTQ"
    GYD = "GYD"
    HKD = "HKD"
    HNL = "HNL"
    HTG = "HTG"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    IQD = "IQD"
    IRR = "IRR"
    ISK = "ISK"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KGS = "KGS"
    KHR = "KHR"
    KMF = "KMF"
    KPW = "KPW"
    KRW = "KRW"
    KWD = "KWD"
    KYD = "KYD"
    KZT = "KZT"
    LAK = "LAK"
    LBP = "LBP"
    LKR = "LKR"
    LRD = "LRD"
    LSL = "LSL"
    LYD = "LYD"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MNT = "MNT"
    MOP = "MOP"
    MRU = "MRU"
    MUR = "MUR"
    MVR = "MVR"
    MWK = "MWK"
    MXN = "MXN"
    MXV = "MXV"
    MYR = "MYR"
    MZN = "MZN"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PAB = "PAB"
    PEN = "PEN"
    PGK = "PGK"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RON = "RON"
    RSD = "RSD"
    RUB = "RUB"
    RWF = "RWF"
    SAR = "SAR"
    SBD = "SBD"
    SCR = "SCR"
    SDG = "SDG"
    SEK = "SEK"
    SGD = "SGD"
    SHP = "SHP"
    SLE = "SLE"
    SLL = "SLL"
    SOS = "SOS"
    SRD = "SRD"
    SSP = "SSP"
    STN = "STN"
    SVC = "SVC"
    SYP = "SYP"
    SZL = "SZL"
    THB = "THB"
    TJS = "TJS"
    TMT = "TMT"
    TND = "TND"
    TOP = "TOP"
    TRY = "TRY"
    TTD = "TTD"
    TWD = "TWD"
    TZS = "TZS"
    UAH = "UAH"
    UGX = "UGX"
    USD = "USD"
    USN = "USN"
    UYI = "UYI"
    UYU = "UYU"
    UYW = "UYW"
    UZS = "UZS"
    VED = "VED"
    VES = "VES"
    VND = "VND"
    VUV = "VUV"
    WST = "WST"
    XAF = "XAF"
    XAG = "XAG"
    XAU = "XAU"
    XBA = "XBA"
    XBB = "XBB"
    XBC = "XBC"
    XBD = "XBD"
    XCD = "XCD"
    XCG = "XCG"
    XDR = "XDR"
    XOF = "XOF"
    XPD = "XPD"
    XPF = "XPF"
    XPT = "XPT"
    XSU = "XSU"
    XTS = "XTS"
    XUA = "XUA"
    XXX = "XXX"
    YER = "YER"
    ZAR = "ZAR"
    ZMW = "ZMW"
    ZWG = "ZWG"
    ZWL = "ZWL"

    @classmethod
    def _missing_(cls, value: object) -> "Currency | None":
        # tolerate " dkk " coming from user input or legacy rows
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized in cls.__members__:
                return cls.__members__[normalized]
        return None

    @classmethod
    def of(cls, value: "Currency | str") -> "Currency":
        if isinstance(value, Currency):
            return value
        if not isinstance(value, str):
            raise TypeError(f"currency must be a Currency or a currency code, got {type(value).__name__}")
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownCurrencyError(value) from exc

    @property
    def code(self) -> str:
        return self.value

    @property
    def fraction_digits(self) -> int | None:
        """Canonical number of fraction digits, None when the unit has no fixed subdivision."""
        return _FRACTION_DIGITS.get(self, 2)

    @property
    def scale(self) -> int:
        digits = self.fraction_digits
        return FALLBACK_SCALE if digits is None else digits

    def __str__(self) -> str:
        return self.value


# Only the exceptions to the 2-digit default are listed.
_FRACTION_DIGITS: dict[Currency, int | None] = {
    # no minor unit
    Currency.BIF: 0,
    Currency.CLP: 0,
    Currency.DJF: 0,
    Currency.GNF: 0,
    Currency.ISK: 0,
    Currency.JPY: 0,
    Currency.KMF: 0,
    Currency.KRW: 0,
    Currency.PYG: 0,
    Currency.RWF: 0,
    Currency.UGX: 0,
    Currency.UYI: 0,
    Currency.VND: 0,
    Currency.VUV: 0,
    Currency.XAF: 0,
    Currency.XOF: 0,
    Currency.XPF: 0,
    # three digits
    Currency.BHD: 3,
    Currency.IQD: 3,
    Currency.JOD: 3,
    Currency.KWD: 3,
    Currency.LYD: 3,
    Currency.OMR: 3,
    Currency.TND: 3,
    # four digits
    Currency.CLF: 4,
    Currency.UYW: 4,
    # funds, metals and testing codes: no fixed subdivision
    Currency.XAG: None,
    Currency.XAU: None,
    Currency.XBA: None,
    Currency.XBB: None,
    Currency.XBC: None,
    Currency.XBD: None,
    Currency.XDR: None,
    Currency.XPD: None,
    Currency.XPT: None,
    Currency.XSU: None,
    Currency.XTS: None,
    Currency.XUA: None,
    Currency.XXX: None,
}
