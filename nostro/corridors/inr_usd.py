"""
inr_usd.py - India → USA corridor (INR → USD)

State Bank of India → Deutsche Bank Mumbai → Deutsche Bank NY → Wells Fargo.
Conversion happens inside the Deutsche Bank group; last leg is Fedwire.
"""

from __future__ import annotations

from ..core import Corridor
from .common import (
    UETR, PACS_002, PACS_008, PACS_009, CAMT_054, END_TO_END_STATUS,
    backward, bank, forward,
)


BANKS = (
    bank('State Bank of India', 'SBININBB', 'India', 'IN', 'originator'),
    bank('Deutsche Bank Mumbai', 'DEUTINBB', 'India', 'IN', 'correspondent'),
    bank('Deutsche Bank NY', 'DEUTUS33', 'United States', 'US', 'intermediary'),
    bank('Wells Fargo', 'WFBIUS6S', 'United States', 'US', 'beneficiary'),
)


SERIAL_STEPS = (
    forward(
        1, 0, 1, PACS_008,
        description='SBI initiates INR transfer with RBI reporting',
        duration='~10 min', fee=2500,
        nostro_action='Debit: SBI debits sender INR account',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-INR-USD-001</EndToEndId>
    <UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="INR">497500.00</IntrBkSttlmAmt>
  <ChrgBr>SHAR</ChrgBr>
  <RgltryRptg><DbtCdtRptgInd>DEBT</DbtCdtRptgInd>
    <Authrty><Nm>Reserve Bank of India</Nm></Authrty></RgltryRptg>
</CdtTrfTxInf>""",
        detail='SBI validates LRS (Liberalized Remittance Scheme, $250K/year limit), files Form A2 '
               'with RBI, debits ₹5,00,000 and deducts ₹2,500 fee. RBI regulatory reporting attached '
               'to pacs.008.',
    ),
    backward(
        2, 1, 0, PACS_002,
        description='Deutsche Bank Mumbai acknowledges',
        duration='~1 min',
        template=f"""<TxInfAndSts><OrgnlUETR>{UETR}</OrgnlUETR><TxSts>ACSP</TxSts></TxInfAndSts>""",
        detail='Deutsche Bank Mumbai confirms receipt. Queues for FX conversion at next available '
               'fixing window.',
    ),
    forward(
        3, 1, 2, PACS_008,
        description='Deutsche Mumbai converts INR→USD, routes to NY',
        duration='4-8 hrs', fee=1500,
        fx_rate='0.01195', fx_from='INR', fx_to='USD',
        nostro_action='Debit: DB Mumbai INR → Credit: DB NY USD nostro',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-INR-USD-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="USD">5927.20</IntrBkSttlmAmt>
  <InstdAmt Ccy="INR">496000.00</InstdAmt>
  <XchgRate>0.01195</XchgRate>
</CdtTrfTxInf>""",
        detail='DB Mumbai converts at 0.01195 INR/USD (mid-market: 0.01217, spread: 1.8%). '
               'Intra-group transfer to DB New York. Settles through RTGS (India) for INR leg.',
    ),
    forward(
        4, 2, 3, PACS_008,
        description='Deutsche NY forwards to Wells Fargo via Fedwire',
        duration='2-4 hrs', fee=12,
        nostro_action='Debit: DB NY USD → Credit: Wells Fargo via Fedwire',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-INR-USD-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="USD">5915.20</IntrBkSttlmAmt>
  <ChrgsInf><Amt Ccy="USD">12.00</Amt>
    <Agt><FinInstnId><BICFI>DEUTUS33</BICFI></FinInstnId></Agt></ChrgsInf>
</CdtTrfTxInf>""",
        detail='DB New York settles with Wells Fargo via Fedwire (immediate finality). $12 wire fee. '
               'Domestic USD settlement is fast.',
    ),
    backward(
        5, 3, 0, PACS_002,
        description='Wells Fargo confirms credit, relayed to SBI',
        duration='~3 min',
        template=f"""
<TxInfAndSts><OrgnlUETR>{UETR}</OrgnlUETR><TxSts>ACCC</TxSts>
  <AccptncDtTm>2026-02-18T18:15:00-05:00</AccptncDtTm></TxInfAndSts>""",
        detail='Wells Fargo credits the beneficiary. Confirmation relayed end-to-end '
               '(5.12% cost including FX spread and fees).',
    ),
)


COVER_STEPS = (
    forward(
        1, 0, 3, PACS_008,
        description='SBI sends the instruction directly to Wells Fargo',
        duration='~10 min',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-INR-USD-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="INR">500000.00</IntrBkSttlmAmt>
  <SttlmInf><SttlmMtd>COVE</SttlmMtd></SttlmInf>
  <InstgAgt><FinInstnId><BICFI>SBININBB</BICFI></FinInstnId></InstgAgt>
  <InstdAgt><FinInstnId><BICFI>WFBIUS6S</BICFI></FinInstnId></InstdAgt>
</CdtTrfTxInf>""",
        detail='Wells Fargo is told about the payment immediately; RBI reporting travels with this '
               'instruction.',
    ),
    forward(
        2, 0, 1, PACS_009,
        description='SBI funds the cover at Deutsche Bank Mumbai',
        duration='~10 min', fee=2500,
        nostro_action='Debit: SBI INR vostro at Deutsche Bank Mumbai',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-INR-USD-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="INR">497500.00</IntrBkSttlmAmt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='SBI deducts its ₹2,500 fee and sends the INR cover to Deutsche Bank Mumbai.',
    ),
    forward(
        3, 1, 2, PACS_009,
        description='Deutsche Mumbai converts INR→USD and passes the cover to NY',
        duration='4-8 hrs', fee=1500,
        fx_rate='0.01195', fx_from='INR', fx_to='USD',
        nostro_action='Debit: DB Mumbai INR → Credit: DB NY USD nostro',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-INR-USD-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="USD">5927.20</IntrBkSttlmAmt>
    <XchgRate>0.01195</XchgRate>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='₹1,500 correspondent fee, then conversion at 0.01195 on the settlement leg.',
    ),
    forward(
        4, 2, 3, PACS_009,
        description='Deutsche NY settles the cover with Wells Fargo over Fedwire',
        duration='2-4 hrs', fee=12,
        nostro_action='Debit: DB NY USD → Credit: Wells Fargo via Fedwire',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-INR-USD-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="USD">5915.20</IntrBkSttlmAmt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='$12 wire fee. Wells Fargo matches the funds against the instruction from step 1.',
    ),
    backward(
        5, 3, 2, CAMT_054,
        description='Wells Fargo confirms the Fedwire credit',
        duration='~1 min',
        template=f"""
<BkToCstmrDbtCdtNtfctn>
  <Ntfctn>
    <Ntry>
      <Amt Ccy="USD">5915.20</Amt>
      <CdtDbtInd>CRDT</CdtDbtInd>
      <NtryDtls><TxDtls><Refs><UETR>{UETR}</UETR></Refs></TxDtls></NtryDtls>
    </Ntry>
  </Ntfctn>
</BkToCstmrDbtCdtNtfctn>""",
        detail='Wells Fargo notifies Deutsche Bank NY that the cover is booked.',
    ),
    backward(
        6, 3, 0, PACS_002,
        message_name=END_TO_END_STATUS,
        description='Wells Fargo reports ACCC to SBI',
        duration='~3 min',
        template=f"""<TxInfAndSts><OrgnlUETR>{UETR}</OrgnlUETR><TxSts>ACCC</TxSts></TxInfAndSts>""",
        detail='Beneficiary credited; completion reported directly to SBI.',
    ),
)


def create_inr_usd_corridor() -> Corridor:
    """India → USA: intra-group conversion at Deutsche Bank."""
    return Corridor(
        id='inr-usd',
        name='India → USA',
        sender_country='India',
        sender_flag='🇮🇳',
        receiver_country='United States',
        receiver_flag='🇺🇸',
        source_currency='INR',
        target_currency='USD',
        default_amount=500000,
        fx_rate='0.01195',
        fx_spread='1.8%',
        total_cost_pct='5.12%',
        settlement_time='12-24 hrs',
        banks=BANKS,
        serial_steps=SERIAL_STEPS,
        cover_steps=COVER_STEPS,
        uetr=UETR,
    )
