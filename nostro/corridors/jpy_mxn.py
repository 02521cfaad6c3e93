"""
jpy_mxn.py - Japan → Mexico corridor (JPY → MXN)

MUFG → HSBC Tokyo → HSBC New York → BBVA México.
There is no direct JPY/MXN market, so the payment is converted twice:
JPY→USD in Tokyo and USD→MXN in New York.
"""

from __future__ import annotations

from ..core import Corridor
from .common import (
    UETR, PACS_002, PACS_008, PACS_009, CAMT_054, END_TO_END_STATUS,
    backward, bank, forward,
)


BANKS = (
    bank('MUFG Bank', 'BOTKJPJT', 'Japan', 'JP', 'originator'),
    bank('HSBC Tokyo', 'HSBCJPJT', 'Japan', 'JP', 'correspondent'),
    bank('HSBC New York', 'MRMDUS33', 'United States', 'US', 'intermediary'),
    bank('BBVA México', 'BCMRMXMM', 'Mexico', 'MX', 'beneficiary'),
)


SERIAL_STEPS = (
    forward(
        1, 0, 1, PACS_008,
        description='MUFG initiates ¥1,000,000 transfer',
        duration='~5 min', fee=5500,
        nostro_action='Debit: MUFG debits sender JPY account',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-JPY-MXN-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="JPY">994500.00</IntrBkSttlmAmt>
  <ChrgBr>SHAR</ChrgBr>
</CdtTrfTxInf>""",
        detail="MUFG (Japan's largest bank) initiates via BOJ-NET (RTGS). ¥5,500 originator fee. "
               "JPY→MXN is an exotic cross requiring USD intermediation (no direct JPY/MXN market).",
    ),
    forward(
        2, 1, 2, PACS_008,
        description='HSBC Tokyo converts JPY→USD, routes via NY',
        duration='8-16 hrs', fee=4000,
        fx_rate='0.006557', fx_from='JPY', fx_to='USD',
        nostro_action='Debit: HSBC JPY nostro → Credit: HSBC NY USD nostro',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-JPY-MXN-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="USD">6494.71</IntrBkSttlmAmt>
  <InstdAmt Ccy="JPY">990500.00</InstdAmt>
  <XchgRate>0.006557</XchgRate>
</CdtTrfTxInf>""",
        detail='First FX hop: JPY→USD at 0.006557. The exotic pair needs two conversions '
               '(JPY→USD→MXN). Tokyo closes at 15:00 JST and NY opens at 09:00 EST, so an '
               'overnight delay is likely.',
    ),
    forward(
        3, 2, 3, PACS_008,
        description='HSBC NY converts USD→MXN, forwards to BBVA',
        duration='12-24 hrs', fee=40,
        fx_rate='17.41', fx_from='USD', fx_to='MXN',
        nostro_action='Debit: HSBC NY USD → Credit: BBVA via SPEI (Mexico RTGS)',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-JPY-MXN-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="MXN">112376.47</IntrBkSttlmAmt>
  <InstdAmt Ccy="USD">6452.14</InstdAmt>
  <XchgRate>17.41</XchgRate>
</CdtTrfTxInf>""",
        detail="Second FX hop: USD→MXN at 17.41. Settlement via SPEI (Mexico's RTGS, open "
               "07:00-17:30 CST). Combined FX spread: 2.8% across two conversions. $40 HSBC fee.",
    ),
    backward(
        4, 3, 0, PACS_002,
        description='BBVA confirms credit, relayed to MUFG',
        duration='~5 min',
        template=f"""<TxInfAndSts><OrgnlUETR>{UETR}</OrgnlUETR><TxSts>ACCC</TxSts></TxInfAndSts>""",
        detail='BBVA credits the beneficiary. Journey: 36-72 hrs spanning 3 time zones '
               '(JST→EST→CST). Cost: 4.2%. Two FX conversions doubled the spread.',
    ),
)


COVER_STEPS = (
    forward(
        1, 0, 3, PACS_008,
        description='MUFG sends the instruction directly to BBVA México',
        duration='~5 min',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-JPY-MXN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="JPY">1000000</IntrBkSttlmAmt>
  <SttlmInf><SttlmMtd>COVE</SttlmMtd></SttlmInf>
  <ChrgBr>SHAR</ChrgBr>
</CdtTrfTxInf>""",
        detail='BBVA México sees the payment at once, even though the cover will cross three '
               'time zones.',
    ),
    forward(
        2, 0, 1, PACS_009,
        description='MUFG funds the cover at HSBC Tokyo',
        duration='~5 min', fee=5500,
        nostro_action='Debit: MUFG JPY account at HSBC Tokyo',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-JPY-MXN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="JPY">994500</IntrBkSttlmAmt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='¥5,500 originator fee; the JPY cover settles over BOJ-NET.',
    ),
    forward(
        3, 1, 2, PACS_009,
        description='HSBC Tokyo converts JPY→USD and passes the cover to NY',
        duration='8-16 hrs', fee=4000,
        fx_rate='0.006557', fx_from='JPY', fx_to='USD',
        nostro_action='Debit: HSBC JPY nostro → Credit: HSBC NY USD nostro',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-JPY-MXN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="USD">6494.71</IntrBkSttlmAmt>
    <XchgRate>0.006557</XchgRate>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='¥4,000 correspondent fee, then the first conversion at 0.006557.',
    ),
    forward(
        4, 2, 3, PACS_009,
        description='HSBC NY converts USD→MXN and settles with BBVA over SPEI',
        duration='12-24 hrs', fee=40,
        fx_rate='17.41', fx_from='USD', fx_to='MXN',
        nostro_action='Debit: HSBC NY USD → Credit: BBVA via SPEI (Mexico RTGS)',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-JPY-MXN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="MXN">112376.47</IntrBkSttlmAmt>
    <XchgRate>17.41</XchgRate>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='$40 HSBC fee, then the second conversion at 17.41. BBVA matches the funds to the '
               'instruction from step 1.',
    ),
    backward(
        5, 3, 2, CAMT_054,
        description='BBVA confirms the SPEI credit',
        duration='~1 min',
        template=f"""
<BkToCstmrDbtCdtNtfctn>
  <Ntfctn>
    <Ntry>
      <Amt Ccy="MXN">112376.47</Amt>
      <CdtDbtInd>CRDT</CdtDbtInd>
      <NtryDtls><TxDtls><Refs><UETR>{UETR}</UETR></Refs></TxDtls></NtryDtls>
    </Ntry>
  </Ntfctn>
</BkToCstmrDbtCdtNtfctn>""",
        detail='BBVA notifies HSBC New York that the cover is booked.',
    ),
    backward(
        6, 3, 0, PACS_002,
        message_name=END_TO_END_STATUS,
        description='BBVA reports ACCC to MUFG',
        duration='~5 min',
        template=f"""<TxInfAndSts><OrgnlUETR>{UETR}</OrgnlUETR><TxSts>ACCC</TxSts></TxInfAndSts>""",
        detail='Beneficiary credited; completion reported directly to MUFG.',
    ),
)


def create_jpy_mxn_corridor() -> Corridor:
    """Japan → Mexico: two conversions through USD."""
    return Corridor(
        id='jpy-mxn',
        name='Japan → Mexico',
        sender_country='Japan',
        sender_flag='🇯🇵',
        receiver_country='Mexico',
        receiver_flag='🇲🇽',
        source_currency='JPY',
        target_currency='MXN',
        default_amount=1000000,
        fx_rate='0.1142',
        fx_spread='2.8%',
        total_cost_pct='4.2%',
        settlement_time='36-72 hrs',
        banks=BANKS,
        serial_steps=SERIAL_STEPS,
        cover_steps=COVER_STEPS,
        uetr=UETR,
    )
