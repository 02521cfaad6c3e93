"""
usd_ngn.py - USA → Nigeria corridor (USD → NGN)

JPMorgan → Citibank NY → Standard Chartered London → GTBank.
No direct Citi→GTBank relationship, so the payment routes through London
and is converted into NGN on the last hop.
"""

from __future__ import annotations

from ..core import Corridor
from .common import (
    UETR, PACS_002, PACS_008, PACS_009, CAMT_054, END_TO_END_STATUS,
    backward, bank, forward,
)


BANKS = (
    bank('JPMorgan Chase', 'CHASUS33', 'United States', 'US', 'originator'),
    bank('Citibank NY', 'CITIUS33', 'United States', 'US', 'correspondent'),
    bank('Standard Chartered', 'SCBLGB2L', 'United Kingdom', 'GB', 'intermediary'),
    bank('Guaranty Trust Bank', 'GTBINGLA', 'Nigeria', 'NG', 'beneficiary'),
)


SERIAL_STEPS = (
    forward(
        1, 0, 1, PACS_008,
        description='JPMorgan initiates USD transfer',
        duration='~5 min', fee=45,
        nostro_action='Debit: JPM debits sender USD account',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-USD-NGN-001</EndToEndId>
    <UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="USD">955.00</IntrBkSttlmAmt>
  <ChrgBr>SHAR</ChrgBr>
  <ChrgsInf><Amt Ccy="USD">45.00</Amt>
    <Agt><FinInstnId><BICFI>CHASUS33</BICFI></FinInstnId></Agt></ChrgsInf>
</CdtTrfTxInf>""",
        detail='JPMorgan validates enhanced KYC (Nigeria is a high-risk corridor), debits $1,000, '
               'deducts $45 origination fee. Compliance screening takes ~3 min due to sanctions '
               'watchlist checks.',
    ),
    backward(
        2, 1, 0, PACS_002,
        description='Citi acknowledges receipt',
        duration='~1 min',
        template=f"""
<TxInfAndSts>
  <OrgnlUETR>{UETR}</OrgnlUETR>
  <TxSts>ACSP</TxSts>
</TxInfAndSts>""",
        detail="Citibank confirms ACSP status. Payment enters Citi's compliance queue for additional "
               "screening (Nigeria corridor requires enhanced due diligence).",
    ),
    forward(
        3, 1, 2, PACS_008,
        description='Citi routes via Standard Chartered (London)',
        duration='8-24 hrs', fee=35,
        nostro_action='Debit: Citi USD nostro → Credit: StanChart USD nostro',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-USD-NGN-001</EndToEndId>
    <UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="USD">920.00</IntrBkSttlmAmt>
  <ChrgsInf><Amt Ccy="USD">35.00</Amt>
    <Agt><FinInstnId><BICFI>CITIUS33</BICFI></FinInstnId></Agt></ChrgsInf>
  <InstgAgt><FinInstnId><BICFI>CITIUS33</BICFI></FinInstnId></InstgAgt>
  <InstdAgt><FinInstnId><BICFI>SCBLGB2L</BICFI></FinInstnId></InstdAgt>
</CdtTrfTxInf>""",
        detail='Citi deducts $35 correspondent fee. Routes via London (StanChart) because no direct '
               'Citi→GTBank relationship exists. Settlement via Fedwire for USD leg. Time zone delay: '
               'NY→London.',
    ),
    forward(
        4, 2, 3, PACS_008,
        description='StanChart converts USD→NGN, forwards to GTBank',
        duration='12-48 hrs', fee=25,
        fx_rate='1580.50', fx_from='USD', fx_to='NGN',
        nostro_action='Debit: StanChart USD → Credit: GTBank NGN nostro',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-USD-NGN-001</EndToEndId>
    <UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="NGN">1414547.50</IntrBkSttlmAmt>
  <InstdAmt Ccy="USD">895.00</InstdAmt>
  <XchgRate>1580.50</XchgRate>
  <ChrgsInf><Amt Ccy="USD">25.00</Amt>
    <Agt><FinInstnId><BICFI>SCBLGB2L</BICFI></FinInstnId></Agt></ChrgsInf>
</CdtTrfTxInf>""",
        detail='StanChart converts at 1,580.50 (mid-market: 1,649.20, spread 4.2%). $25 fee deducted. '
               'NGN settlement depends on CBN clearing hours (Lagos business day). Longest delay in chain.',
    ),
    backward(
        5, 3, 2, PACS_002,
        description='GTBank confirms beneficiary credit',
        duration='~5 min',
        template=f"""
<TxInfAndSts>
  <OrgnlUETR>{UETR}</OrgnlUETR>
  <TxSts>ACCC</TxSts>
  <AccptncDtTm>2026-02-20T14:30:00+01:00</AccptncDtTm>
</TxInfAndSts>""",
        detail='GTBank credits the beneficiary. Total journey: 48-96 hrs. Effective cost: 8.78% '
               '($45+$35+$25 fees + 4.2% FX spread).',
    ),
    backward(
        6, 2, 0, PACS_002,
        message_name=END_TO_END_STATUS,
        description='Final ACCC relayed to JPMorgan',
        duration='~2 min',
        template=f"""
<TxInfAndSts>
  <OrgnlUETR>{UETR}</OrgnlUETR>
  <TxSts>ACCC</TxSts>
  <ChrgsInf><TtlChrgsAndTaxAmt Ccy="USD">105.00</TtlChrgsAndTaxAmt></ChrgsInf>
</TxInfAndSts>""",
        detail='JPMorgan receives final confirmation. gpi Tracker shows end-to-end completion. '
               'Customer notified: "Your $1,000 transfer to Nigeria is complete."',
    ),
)


COVER_STEPS = (
    forward(
        1, 0, 3, PACS_008,
        description='JPMorgan sends the instruction directly to GTBank',
        duration='~5 min',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-USD-NGN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="USD">1000.00</IntrBkSttlmAmt>
  <SttlmInf><SttlmMtd>COVE</SttlmMtd></SttlmInf>
  <ChrgBr>SHAR</ChrgBr>
  <InstgAgt><FinInstnId><BICFI>CHASUS33</BICFI></FinInstnId></InstgAgt>
  <InstdAgt><FinInstnId><BICFI>GTBINGLA</BICFI></FinInstnId></InstdAgt>
</CdtTrfTxInf>""",
        detail='GTBank receives the full payment details up front and can pre-screen the beneficiary '
               'while the funds are still travelling.',
    ),
    forward(
        2, 0, 1, PACS_009,
        description='JPMorgan sends the cover to Citibank NY',
        duration='~5 min', fee=45,
        nostro_action='Debit: JPM USD account at Citi',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-USD-NGN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="USD">955.00</IntrBkSttlmAmt>
    <Dbtr><FinInstnId><BICFI>CHASUS33</BICFI></FinInstnId></Dbtr>
    <Cdtr><FinInstnId><BICFI>GTBINGLA</BICFI></FinInstnId></Cdtr>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='The cover settles the USD leg through Citi. JPMorgan keeps its $45 origination fee.',
    ),
    backward(
        3, 1, 0, PACS_002,
        description='Citi accepts the cover',
        duration='~1 min',
        template=f"""
<TxInfAndSts>
  <OrgnlUETR>{UETR}</OrgnlUETR>
  <TxSts>ACSP</TxSts>
</TxInfAndSts>""",
        detail='Citibank accepts the cover into its compliance queue.',
    ),
    forward(
        4, 1, 2, PACS_009,
        description='Citi passes the cover to Standard Chartered London',
        duration='8-24 hrs', fee=35,
        nostro_action='Debit: Citi USD nostro → Credit: StanChart USD nostro',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-USD-NGN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="USD">920.00</IntrBkSttlmAmt>
    <InstgAgt><FinInstnId><BICFI>CITIUS33</BICFI></FinInstnId></InstgAgt>
    <InstdAgt><FinInstnId><BICFI>SCBLGB2L</BICFI></FinInstnId></InstdAgt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='Citi deducts its $35 correspondent fee and settles the USD leg over Fedwire.',
    ),
    forward(
        5, 2, 3, PACS_009,
        description='StanChart converts USD→NGN and settles with GTBank',
        duration='12-48 hrs', fee=25,
        fx_rate='1580.50', fx_from='USD', fx_to='NGN',
        nostro_action='Debit: StanChart USD → Credit: GTBank NGN nostro',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-USD-NGN-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="NGN">1414547.50</IntrBkSttlmAmt>
    <XchgRate>1580.50</XchgRate>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='StanChart takes $25 and converts at 1,580.50. GTBank can now release the funds it was '
               'told about in step 1.',
    ),
    backward(
        6, 3, 2, CAMT_054,
        description='GTBank confirms NGN nostro credit',
        duration='~5 min',
        template=f"""
<BkToCstmrDbtCdtNtfctn>
  <Ntfctn>
    <Ntry>
      <Amt Ccy="NGN">1414547.50</Amt>
      <CdtDbtInd>CRDT</CdtDbtInd>
      <NtryDtls><TxDtls><Refs><UETR>{UETR}</UETR></Refs></TxDtls></NtryDtls>
    </Ntry>
  </Ntfctn>
</BkToCstmrDbtCdtNtfctn>""",
        detail='GTBank notifies StanChart that the NGN cover has been booked.',
    ),
    backward(
        7, 3, 0, PACS_002,
        message_name=END_TO_END_STATUS,
        description='GTBank reports ACCC to JPMorgan',
        duration='~2 min',
        template=f"""
<TxInfAndSts>
  <OrgnlUETR>{UETR}</OrgnlUETR>
  <TxSts>ACCC</TxSts>
</TxInfAndSts>""",
        detail='GTBank credits the beneficiary and confirms directly to JPMorgan.',
    ),
)


def create_usd_ngn_corridor() -> Corridor:
    """USA → Nigeria: routed via London, converted on the last hop."""
    return Corridor(
        id='usd-ngn',
        name='USA → Nigeria',
        sender_country='United States',
        sender_flag='🇺🇸',
        receiver_country='Nigeria',
        receiver_flag='🇳🇬',
        source_currency='USD',
        target_currency='NGN',
        default_amount=1000,
        fx_rate='1580.50',
        fx_spread='4.2%',
        total_cost_pct='8.78%',
        settlement_time='48-96 hrs',
        banks=BANKS,
        serial_steps=SERIAL_STEPS,
        cover_steps=COVER_STEPS,
        uetr=UETR,
    )
