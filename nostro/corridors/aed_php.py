"""
aed_php.py - UAE → Philippines corridor (AED → PHP)

Emirates NBD → Standard Chartered Dubai → Standard Chartered Manila → BDO.
A remittance corridor routed inside the Standard Chartered group; the
domestic leg settles over PhilPaSS, so its fee is quoted in PHP.
"""

from __future__ import annotations

from ..core import Corridor
from .common import (
    UETR, PACS_002, PACS_008, PACS_009, CAMT_054, END_TO_END_STATUS,
    backward, bank, forward,
)


BANKS = (
    bank('Emirates NBD', 'ABORAEADXXX', 'UAE', 'AE', 'originator'),
    bank('Standard Chartered Dubai', 'SCBLAEAD', 'UAE', 'AE', 'correspondent'),
    bank('Standard Chartered Manila', 'SCBLPHMM', 'Philippines', 'PH', 'intermediary'),
    bank('BDO Unibank', 'ABORPHMM', 'Philippines', 'PH', 'beneficiary'),
)


SERIAL_STEPS = (
    forward(
        1, 0, 1, PACS_008,
        description='Emirates NBD initiates remittance',
        duration='~5 min', fee=25,
        nostro_action='Debit: ENBD debits sender AED account',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-AED-PHP-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="AED">4975.00</IntrBkSttlmAmt>
  <Purp><Cd>BEXP</Cd></Purp>
</CdtTrfTxInf>""",
        detail='Emirates NBD processes the remittance (UAE→PH is a major OFW corridor, with 2.1M '
               'Filipino workers in the UAE). Purpose code BEXP (Business Expenses). AED 25 '
               'originator fee.',
    ),
    forward(
        2, 1, 2, PACS_008,
        description='StanChart Dubai routes to StanChart Manila',
        duration='8-16 hrs', fee=18,
        fx_rate='15.24', fx_from='AED', fx_to='PHP',
        nostro_action='Debit: StanChart AED nostro → Credit: StanChart PHP nostro',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-AED-PHP-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="PHP">75544.68</IntrBkSttlmAmt>
  <InstdAmt Ccy="AED">4957.00</InstdAmt>
  <XchgRate>15.24</XchgRate>
</CdtTrfTxInf>""",
        detail='Intra-group StanChart routing. FX at 15.24 (mid: 15.56, spread 2.1%). AED 18 fee. '
               'Time zone overlap is good (Dubai GMT+4, Manila GMT+8) but BSP clearing hours apply.',
    ),
    forward(
        3, 2, 3, PACS_008,
        description='StanChart Manila credits BDO via PhilPaSS',
        duration='2-4 hrs', fee=510,
        nostro_action='Debit: StanChart PHP → Credit: BDO via PhilPaSS (RTGS)',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-AED-PHP-001</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="PHP">75034.68</IntrBkSttlmAmt>
</CdtTrfTxInf>""",
        detail='StanChart Manila settles with BDO via PhilPaSS (Philippine Payment and Settlement '
               'System, the domestic RTGS). ₱510 fee (~$10). Domestic leg is fast.',
    ),
    backward(
        4, 3, 0, PACS_002,
        description='BDO confirms credit, relayed to Emirates NBD',
        duration='~3 min',
        template=f"""<TxInfAndSts><OrgnlUETR>{UETR}</OrgnlUETR><TxSts>ACCC</TxSts></TxInfAndSts>""",
        detail='BDO credits the beneficiary. AED 5,000 sent, roughly ₱75,000 received. Cost: 3.45%. '
               'Compared to app-based remitters: ~1.0% and instant.',
    ),
)


COVER_STEPS = (
    forward(
        1, 0, 3, PACS_008,
        description='Emirates NBD sends the instruction directly to BDO',
        duration='~5 min',
        template=f"""
<CdtTrfTxInf>
  <PmtId><EndToEndId>E2E-AED-PHP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
  <IntrBkSttlmAmt Ccy="AED">5000.00</IntrBkSttlmAmt>
  <SttlmInf><SttlmMtd>COVE</SttlmMtd></SttlmInf>
  <Purp><Cd>BEXP</Cd></Purp>
</CdtTrfTxInf>""",
        detail='BDO learns of the remittance straight away and can notify the family before '
               'the funds arrive.',
    ),
    forward(
        2, 0, 1, PACS_009,
        description='Emirates NBD funds the cover at StanChart Dubai',
        duration='~5 min', fee=25,
        nostro_action='Debit: ENBD AED account at StanChart Dubai',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-AED-PHP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="AED">4975.00</IntrBkSttlmAmt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='AED 25 originator fee, then the AED cover moves to Standard Chartered Dubai.',
    ),
    forward(
        3, 1, 2, PACS_009,
        description='StanChart converts AED→PHP inside the group',
        duration='8-16 hrs', fee=18,
        fx_rate='15.24', fx_from='AED', fx_to='PHP',
        nostro_action='Debit: StanChart AED nostro → Credit: StanChart PHP nostro',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-AED-PHP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="PHP">75544.68</IntrBkSttlmAmt>
    <XchgRate>15.24</XchgRate>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='AED 18 fee, then conversion at 15.24 on the settlement leg.',
    ),
    forward(
        4, 2, 3, PACS_009,
        description='StanChart Manila settles the cover with BDO over PhilPaSS',
        duration='2-4 hrs', fee=510,
        nostro_action='Debit: StanChart PHP → Credit: BDO via PhilPaSS (RTGS)',
        template=f"""
<FICdtTrf>
  <CdtTrfTxInf>
    <PmtId><EndToEndId>E2E-AED-PHP-002</EndToEndId><UETR>{UETR}</UETR></PmtId>
    <IntrBkSttlmAmt Ccy="PHP">75034.68</IntrBkSttlmAmt>
  </CdtTrfTxInf>
</FICdtTrf>""",
        detail='₱510 domestic fee. BDO matches the funds to the instruction from step 1.',
    ),
    backward(
        5, 3, 2, CAMT_054,
        description='BDO confirms the PhilPaSS credit',
        duration='~1 min',
        template=f"""
<BkToCstmrDbtCdtNtfctn>
  <Ntfctn>
    <Ntry>
      <Amt Ccy="PHP">75034.68</Amt>
      <CdtDbtInd>CRDT</CdtDbtInd>
      <NtryDtls><TxDtls><Refs><UETR>{UETR}</UETR></Refs></TxDtls></NtryDtls>
    </Ntry>
  </Ntfctn>
</BkToCstmrDbtCdtNtfctn>""",
        detail='BDO notifies Standard Chartered Manila that the cover is booked.',
    ),
    backward(
        6, 3, 0, PACS_002,
        message_name=END_TO_END_STATUS,
        description='BDO reports ACCC to Emirates NBD',
        duration='~3 min',
        template=f"""<TxInfAndSts><OrgnlUETR>{UETR}</OrgnlUETR><TxSts>ACCC</TxSts></TxInfAndSts>""",
        detail='Beneficiary credited; completion reported directly to Emirates NBD.',
    ),
)


def create_aed_php_corridor() -> Corridor:
    """UAE → Philippines: remittance routed inside one banking group."""
    return Corridor(
        id='aed-php',
        name='UAE → Philippines',
        sender_country='UAE',
        sender_flag='🇦🇪',
        receiver_country='Philippines',
        receiver_flag='🇵🇭',
        source_currency='AED',
        target_currency='PHP',
        default_amount=5000,
        fx_rate='15.24',
        fx_spread='2.1%',
        total_cost_pct='3.45%',
        settlement_time='24-48 hrs',
        banks=BANKS,
        serial_steps=SERIAL_STEPS,
        cover_steps=COVER_STEPS,
        uetr=UETR,
    )
