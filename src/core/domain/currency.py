"""
Currency — Закрытый перечень кодов валют

Коды ISO 4217 плюс несколько обобщённых валют (DINAR, DOLLAR, PESO, RIYAL),
для которых страна не важна. Ядро использует Currency только как ключ
в таблицах названий.
"""

from enum import Enum


class Currency(str, Enum):
    """Код валюты"""

    AED = "AED"
    ARS = "ARS"
    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CRC = "CRC"
    DINAR = "DINAR"
    DOLLAR = "DOLLAR"
    DZD = "DZD"
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    JPY = "JPY"
    KRW = "KRW"
    KWD = "KWD"
    KZT = "KZT"
    MXN = "MXN"
    MYR = "MYR"
    NOK = "NOK"
    NZD = "NZD"
    PEN = "PEN"
    PESO = "PESO"
    PHP = "PHP"
    PLN = "PLN"
    QAR = "QAR"
    RIYAL = "RIYAL"
    RUB = "RUB"
    SAR = "SAR"
    SGD = "SGD"
    THB = "THB"
    TRY = "TRY"
    TWD = "TWD"
    UAH = "UAH"
    USD = "USD"
    UYU = "UYU"
    VND = "VND"
    ZAR = "ZAR"
