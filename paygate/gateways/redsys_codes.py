# LarpManager - https://larpmanager.com
# Copyright (C) 2025 Scanagatta Mauro
#
# This file is part of LarpManager and is dual-licensed:
#
# 1. Under the terms of the GNU Affero General Public License (AGPL) version 3,
#    as published by the Free Software Foundation. You may use, modify, and
#    distribute this file under those terms.
#
# 2. Under a commercial license, allowing use in closed-source or proprietary
#    environments without the obligations of the AGPL.
#
# If you have obtained this file under the AGPL, and you make it available over
# a network, you must also make the complete source code available under the same license.
#
# For more information or to purchase a commercial license, contact:
# commercial@larpmanager.com
#
# SPDX-License-Identifier: AGPL-3.0-or-later OR Proprietary

"""Descriptions of Redsys Ds_Response and Ds_ErrorCode values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

UNKNOWN_RESPONSE_CODE = "Unknown response code"

REDSYS_RESPONSE_CODES: dict[str, str] = {
    # Ds_Response values
    "0101": "Expired card",
    "0102": "Card temporarily blocked or under suspicion of fraud",
    "0104": "Operation not allowed for this card or terminal",
    "0106": "PIN attempts exceeded",
    "0116": "Insufficient funds",
    "0118": "Card not registered",
    "0125": "Card not active",
    "0129": "Wrong CVV security code",
    "0180": "Denied by issuer",
    "0184": "Cardholder authentication failed",
    "0190": "Denied without specific reason",
    "0191": "Wrong expiry date",
    "0202": "Card temporarily blocked or under suspicion of fraud, card withdrawn",
    "0904": "Merchant configuration problem, contact your bank",
    "0909": "System error",
    "0912": "Issuer not available",
    "0913": "Duplicated order",
    "0944": "Wrong session",
    "0950": "Refund not allowed",
    "8102": "Operation redirected to the issuer for EMV3DS V1.0.2 authentication (H2H)",
    "8210": "Operation redirected to the issuer for EMV3DS V2.1.0 authentication (H2H)",
    "8220": "Operation redirected to the issuer for EMV3DS V2.2.0 authentication (H2H)",
    "9001": "Internal error",
    "9002": "Generic error",
    "9003": "Generic error",
    "9004": "Generic error",
    "9005": "Generic error",
    "9006": "Generic error",
    "9007": "Malformed request message",
    "9008": "Missing Ds_Merchant_MerchantCode",
    "9009": "Wrong Ds_Merchant_MerchantCode format",
    "9010": "Missing Ds_Merchant_Terminal",
    "9011": "Wrong Ds_Merchant_Terminal format",
    "9012": "Generic error",
    "9013": "Generic error",
    "9014": "Wrong Ds_Merchant_Order format",
    "9015": "Missing Ds_Merchant_Currency",
    "9016": "Wrong Ds_Merchant_Currency format",
    "9018": "Missing Ds_Merchant_Amount",
    "9019": "Wrong Ds_Merchant_Amount format",
    "9020": "Missing Ds_Merchant_MerchantSignature",
    "9021": "Empty Ds_Merchant_MerchantSignature",
    "9022": "Wrong Ds_Merchant_TransactionType format",
    "9023": "Unknown Ds_Merchant_TransactionType",
    "9024": "Ds_Merchant_ConsumerLanguage longer than 3 characters",
    "9025": "Wrong Ds_Merchant_ConsumerLanguage format",
    "9026": "Configuration problem",
    "9027": "Check the currency being sent",
    "9028": "Merchant or terminal deactivated",
    "9029": "Check how the message is built",
    "9030": "Wrong operation type received",
    "9031": "Wrong payment method received",
    "9032": "Check how the refund message is built",
    "9033": "Wrong operation type",
    "9034": "Internal error",
    "9035": "Internal error retrieving session data",
    "9036": "Error reading mobile payment data from the XML",
    "9037": "Invalid phone number",
    "9038": "Generic error",
    "9039": "Generic error",
    "9040": "Merchant configuration error, contact your bank",
    "9041": "Error computing the signature",
    "9042": "Error computing the signature",
    "9043": "Generic error",
    "9044": "Generic error",
    "9046": "Card BIN configuration problem",
    "9047": "Generic error",
    "9048": "Generic error",
    "9049": "Generic error",
    "9050": "Generic error",
    "9051": "Duplicated order number",
    "9052": "Generic error",
    "9053": "Generic error",
    "9054": "No operation to refund",
    "9055": "More than one payment with the same order number",
    "9056": "Check the authorization status",
    "9057": "Refund amount exceeds the allowed one",
    "9058": "Check the data used to validate the confirmation",
    "9059": "Check that the operation exists",
    "9060": "Check that the confirmation exists",
    "9061": "Check the pre-authorization status",
    "9062": "Check the amount to confirm",
    "9063": "Check the card number being sent",
    "9064": "Wrong number of card digits",
    "9065": "Card number is not numeric",
    "9066": "Wrong expiry month",
    "9067": "Expiry month is not numeric",
    "9068": "Invalid expiry month",
    "9069": "Invalid expiry year",
    "9070": "Expiry year is not numeric",
    "9071": "Expired card",
    "9072": "Operation cannot be cancelled",
    "9073": "Cancellation error",
    "9074": "Missing Ds_Merchant_Order",
    "9075": "Check how the order number is sent",
    "9077": "Check the order number",
    "9078": "Payments with this card are not allowed by the merchant payment methods",
    "9079": "Generic error",
    "9080": "Generic error",
    "9081": "Session data lost",
    "9082": "Generic error",
    "9083": "Generic error",
    "9084": "Ds_Merchant_Conciliation is null",
    "9085": "Ds_Merchant_Conciliation is not numeric",
    "9086": "Ds_Merchant_Conciliation is not 6 characters long",
    "9087": "Ds_Merchant_Session is null",
    "9088": "Check the value sent in this field",
    "9089": "Expiry date is not 4 characters long",
    "9090": "Generic error, contact support",
    "9091": "Generic error, contact support",
    "9092": "Wrong expiry date entered",
    "9093": "Denied by issuer",
    "9094": "Denied by issuer",
    "9095": "Denied by issuer",
    "9096": "Wrong 3DSecure data format",
    "9097": "Invalid Ds_Merchant_CComercio",
    "9098": "Invalid Ds_Merchant_CVentana",
    "9099": "Error reading the authentication response",
    "9103": "Error building the authentication request",
    "9104": "Merchant requires secure cardholder and cardholder has no secure purchase key",
    "9112": "Check Ds_Merchant_TransactionType",
    "9113": "Internal error",
    "9114": "Request sent with GET, POST is required",
    "9115": "Check the operation data being sent",
    "9116": "Operation to pay an instalment on is not valid",
    "9117": "Operation to pay an instalment on is not authorized",
    "9118": "Total instalment amount exceeded",
    "9119": "Invalid Ds_Merchant_DateFrecuency (recurring payments)",
    "9120": "Invalid Ds_Merchant_ChargeExpiryDate",
    "9121": "Invalid Ds_Merchant_SumTotal",
    "9122": "Wrong Ds_Merchant_DateFrecuency or Ds_Merchant_SumTotal format",
    "9123": "Transaction deadline exceeded",
    "9124": "Minimum frequency of a successive recurring payment not elapsed",
    "9125": "Generic error",
    "9126": "Duplicated operation",
    "9127": "Internal error",
    "9128": "Internal error",
    "9129": "Mass request attempt detected from the IP",
    "9130": "Internal error",
    "9131": "Internal error",
    "9132": "Authorization confirmation more than 7 days after the pre-authorization",
    "9133": "Authentication confirmation more than 45 days after the previous authentication",
    "9134": "Invalid Ds_MerchantCiers",
    "9135": "Error generating a new IDETRA value",
    "9136": "Error building the notification message",
    "9137": "Error validating the card as domestic 3DSecure",
    "9138": "Authorization prevented by a rule of the rules file",
    "9139": "Duplicated initial recurring payment",
    "9140": "Internal error",
    "9141": "Wrong 3DSecure format",
    "9142": "Payment time exceeded",
    "9151": "Internal error",
    "9169": "Invalid Ds_Merchant_MatchingData",
    "9170": "Check the acquirer sent in the field",
    "9171": "Check the CSB being sent",
    "9172": "Invalid PUCE Ds_Merchant_MerchantCode",
    "9173": "Check the OK URL",
    "9174": "Internal error",
    "9175": "Internal error",
    "9181": "Internal error",
    "9182": "Internal error",
    "9183": "Internal error",
    "9184": "Internal error",
    "9186": "Missing operation data",
    "9187": "Internal format error",
    "9197": "Error reading the shopping cart data",
    "9214": "Merchant does not allow refunds with this signature type",
    "9216": "CVV2 longer than 3 characters",
    "9217": "Wrong CVV2 format",
    "9218": "Merchant does not allow secure operations through the operations or WebService entries",
    "9219": "Contact your bank",
    "9220": "Contact your bank",
    "9221": "Customer did not enter the CVV2",
    "9222": "A cancellation is already linked to the pre-authorization",
    "9223": "Pre-authorization to cancel is not authorized",
    "9224": "Merchant cannot cancel operations without extended signature",
    "9225": "No operation to cancel",
    "9226": "Wrong manual cancellation data",
    "9227": "Check Ds_Merchant_TransactionDate",
    "9228": "Card type cannot make deferred payments",
    "9229": "Wrong deferred payment code",
    "9230": "Merchant does not allow split payments, contact your bank",
    "9231": "No applicable payment method, contact your bank",
    "9232": "Payment method not available",
    "9233": "Unknown payment method",
    "9234": "Account holder name not available",
    "9235": "Sis_Numero_Entidad not available",
    "9236": "Sis_Numero_Entidad has the wrong length",
    "9237": "Sis_Numero_Entidad is not numeric",
    "9238": "Sis_Numero_Oficina not available",
    "9239": "Sis_Numero_Oficina has the wrong length",
    "9240": "Sis_Numero_Oficina is not numeric",
    "9241": "Sis_Numero_DC not available",
    "9242": "Sis_Numero_DC has the wrong length",
    "9243": "Sis_Numero_DC is not numeric",
    "9244": "Sis_Numero_Cuenta not available",
    "9245": "Sis_Numero_Cuenta has the wrong length",
    "9246": "Sis_Numero_Cuenta is not numeric",
    "9247": "Invalid customer account check digit",
    "9248": "Merchant does not allow direct debit",
    "9249": "Generic error",
    "9250": "Generic error",
    "9251": "Transfers not allowed, contact your bank",
    "9252": "Merchant configuration does not allow sending the card, contact your bank",
    "9253": "Card number not entered correctly",
    "9254": "Contact your bank",
    "9255": "Contact your bank",
    "9256": "Merchant does not allow pre-authorizations",
    "9257": "Card does not allow pre-authorizations",
    "9258": "Check the validation data",
    "9259": "No original operation to notify or query",
    "9260": "Wrong SIS entry",
    "9261": "Contact your bank",
    "9262": "Currency not allowed for transfer or direct debit",
    "9263": "Error computing data to process the operation",
    "9264": "Error processing the response data received",
    "9265": "Signature error in the data received",
    "9266": "Unable to retrieve the data of the operation received",
    "9267": "Operation cannot be processed without a customer account code",
    "9268": "Refund cannot be processed through WebService",
    "9269": "Refunds of direct debit operations not yet downloaded are not allowed",
    "9270": "Merchant cannot perform deferred pre-authorizations",
    "9274": "Unknown operation type or not allowed by this SIS entry",
    "9275": "Prize without IdPremio",
    "9276": "Prize units are not numeric",
    "9277": "Generic error, contact Redsys",
    "9278": "Error querying prizes",
    "9279": "Merchant does not have loyalty operations enabled",
    "9280": "Contact your bank",
    "9281": "Contact your bank",
    "9282": "Contact your bank",
    "9283": "Contact your bank",
    "9284": "No operation for the additional payment",
    "9285": "More than one operation for the additional payment",
    "9286": "Operation for the additional payment is not accepted",
    "9287": "Operation exceeded the additional payment amount",
    "9288": "Maximum number of additional payments exceeded",
    "9289": "Additional payment exceeds the maximum allowed days",
    "9290": "Contact your bank",
    "9291": "Contact your bank",
    "9292": "Contact your bank",
    "9293": "Contact your bank",
    "9294": "Card is not private",
    "9295": "Duplicated operation, retry in 1 minute",
    "9296": "Initial card on file operation not found",
    "9297": "Number of successive card on file operations exceeded",
    "9298": "Operation type not allowed, contact your bank",
    "9299": "PayPal payment error",
    "9300": "PayPal payment error",
    "9301": "PayPal payment error",
    "9302": "Currency not valid for PayPal payments",
    "9304": "Split payment not allowed for non FINCONSUM cards",
    "9305": "Check the operation currency",
    "9306": "Invalid Ds_Merchant_PrepaidCard",
    "9307": "Gift card operations not allowed, contact your bank",
    "9308": "Gift card top-up time limit exceeded",
    "9309": "Missing additional data for the prepaid card top-up",
    "9310": "Invalid Ds_Merchant_Prepaid_Expiry",
    "9311": "Generic error",
    "9319": "Merchant does not belong to the group in Ds_Merchant_Group",
    "9320": "Error generating the reference",
    "9321": "Identifier not linked to the merchant",
    "9322": "Check the group format",
    "9323": "Two phase payments require Ds_Merchant_Customer_Mobile or Ds_Merchant_Customer_Mail",
    "9324": "Unable to send the link to the customer, check the email address",
    "9326": "Card data sent in the first phase of a two phase payment",
    "9327": "Neither mobile nor email sent in the first phase of a two phase payment",
    "9328": "Invalid two phase payment token",
    "9329": "Unable to retrieve the two phase payment token",
    "9330": "Wrong two phase payment dates",
    "9331": "Operation status not valid or operation not found",
    "9332": "Original operation and refund amounts must be identical",
    "9333": "MasterPass Wallet request error",
    "9334": "Blocked by security control",
    "9335": "Invalid Ds_Merchant_Recharge_Commission",
    "9336": "Generic error",
    "9342": "Merchant does not allow tax payments",
    "9343": "Missing or wrong Ds_Merchant_Tax_Reference",
    "9344": "User chose to defer the payment without accepting the instalment conditions",
    "9345": "Check the number of instalments sent",
    "9346": "Check the DS_MERCHANT_PAY_TYPE format",
    "9347": "Merchant not configured for BIN queries",
    "9348": "BIN in the query not recognised",
    "9349": "Amount and DCC data do not match those registered in SIS",
    "9350": "No DCC data registered in SIS for this order number",
    "9351": "Wrong prepaid authentication",
    "9352": "Signature type does not allow this operation",
    "9353": "Invalid key",
    "9354": "Error decrypting the SIS request",
    "9355": "Merchant and terminal in the encrypted data differ from the request",
    "9356": "Merchant has no fraud control enabled, contact your bank",
    "9357": "Merchant has fraud control enabled and ds_merchant_merchantscf is missing",
    "9359": "Merchant only allows tax payments and Ds_Merchant_TaxReference is missing",
    "9370": "Wrong Scf_Merchant_Nif format, maximum length 16",
    "9371": "Wrong Scf_Merchant_Name format, maximum length 30",
    "9372": "Wrong Scf_Merchant_First_Name format, maximum length 30",
    "9373": "Wrong Scf_Merchant_Last_Name format, maximum length 30",
    "9374": "Wrong Scf_Merchant_User format, maximum length 45",
    "9375": "Wrong Scf_Affinity_Card format, S or N",
    "9376": "Wrong Scf_Payment_Financed format, S or N",
    "9377": "Wrong Scf_Ticket_Departure_Point format, maximum length 30",
    "9378": "Wrong Scf_Ticket_Destination format, maximum length 30",
    "9379": "Wrong Scf_Ticket_Departure_Date format, yyyyMMddHHmmss expected",
    "9380": "Wrong Scf_Ticket_Num_Passengers format, maximum length 1",
    "9381": "Wrong Scf_Passenger_Dni format, maximum length 16",
    "9382": "Wrong Scf_Passenger_Name format, maximum length 30",
    "9383": "Wrong Scf_Passenger_First_Name format, maximum length 30",
    "9384": "Wrong Scf_Passenger_Last_Name format, maximum length 30",
    "9385": "Wrong Scf_Passenger_Check_Luggage format, S or N",
    "9386": "Wrong Scf_Passenger_Special_luggage format, S or N",
    "9387": "Wrong Scf_Passenger_Insurance_Trip format, S or N",
    "9388": "Wrong Scf_Passenger_Type_Trip format, N or I",
    "9389": "Wrong Scf_Passenger_Pet format, S or N",
    "9390": "Wrong Scf_Order_Channel format, M (mobile), P (PC) or T (tablet)",
    "9391": "Wrong Scf_Order_Total_Products format, numeric with maximum length 3",
    "9392": "Wrong Scf_Order_Different_Products format, numeric with maximum length 3",
    "9393": "Wrong Scf_Order_Amount format, numeric with maximum length 19",
    "9394": "Wrong Scf_Order_Max_Amount format, numeric with maximum length 19",
    "9395": "Wrong Scf_Order_Coupon format, S or N",
    "9396": "Wrong Scf_Order_Show_Type format, maximum length 30",
    "9397": "Wrong Scf_Wallet_Identifier format",
    "9398": "Wrong Scf_Wallet_Client_Identifier format",
    "9399": "Wrong Scf_Merchant_Ip_Address format",
    "9400": "Wrong Scf_Merchant_Proxy format",
    "9401": "Wrong Ds_Merchant_Mail_Phone_Number format, numeric with maximum length 19",
    "9402": "Error calling SafetyPay for the url token",
    "9403": "Error requesting the url token from SafetyPay",
    "9404": "SafetyPay request error",
    "9405": "Url token request denied by SafetyPay",
    "9406": "Contact your bank to check the activity sector configuration",
    "9407": "Amount exceeds the maximum allowed for a gambling prize payment",
    "9408": "Card must have been used in the last year for a gambling prize payment",
    "9409": "Card must be a domestic Visa or MasterCard for a gambling prize payment",
    "9410": "Denied by issuer",
    "9411": "Merchant configuration error, contact your bank",
    "9412": "Wrong signature",
    "9413": "Denied, contact your bank",
    "9414": "Wrong sales plan",
    "9415": "Wrong product type",
    "9416": "Refund amount not allowed",
    "9417": "Refund date not allowed",
    "9418": "No sales plan in force",
    "9419": "Account type not allowed",
    "9420": "Merchant has no payment methods for this operation",
    "9421": "Card not allowed, not an Agro product",
    "9422": "Missing data for Agro operation",
    "9423": "Wrong merchant CNPJ",
    "9424": "Establishment not found",
    "9425": "Card not found",
    "9426": "Routing not valid for the merchant",
    "9427": "Unable to connect to CECA",
    "9428": "Debit operation not secure",
    "9429": "Wrong Ds_SignatureVersion sent by the merchant",
    "9430": "Unable to decode Ds_MerchantParameters",
    "9431": "Wrong JSON object in Ds_MerchantParameters",
    "9432": "Wrong merchant FUC code",
    "9433": "Wrong merchant terminal",
    "9434": "Missing order number in the merchant operation",
    "9435": "Error computing the signature",
    "9436": "Error building the parent element",
    "9437": "Error building the element",
    "9438": "Error building the element",
    "9439": "Error building the element",
    "9440": "Generic error",
    "9441": "No banks available for MyBank",
    "9442": "Generic error",
    "9443": "Payment with this card not allowed",
    "9444": "Old signatures used while the merchant is configured for HMAC SHA256",
    "9445": "Generic error",
    "9446": "Payment method is mandatory",
    "9447": "Reference generated by a different acquirer",
    "9448": "Merchant does not have the DINERS payment method",
    "9449": "Payment type not allowed for this card type",
    "9450": "Payment type not allowed for this card type",
    "9451": "Payment type not allowed for this card type",
    "9453": "Payments with this card type not allowed",
    "9454": "Payments with this card type not allowed",
    "9455": "Payments with this card type not allowed",
    "9456": "No payment method configured, contact your bank",
    "9457": "MasterCard SecureCode with VERes N on a commercial MasterCard and no MasterCard Commercial payment method",
    "9458": "MasterCard SecureCode with VERes U on a commercial MasterCard and no MasterCard Commercial payment method",
    "9459": "No payment method configured, contact your bank",
    "9460": "No payment method configured, contact your bank",
    "9461": "No payment method configured, contact your bank",
    "9462": "Payment method not available for host to host connections",
    "9463": "Payment method not allowed",
    "9464": "Merchant does not have the MasterCard Commercial payment method",
    "9465": "No payment method configured, contact your bank",
    "9466": "Reference does not exist",
    "9467": "Reference has been deactivated",
    "9468": "Reference generated by a different acquirer",
    "9469": "MR fraud check not passed",
    "9470": "First factor request failed",
    "9471": "Wrong redirect URL for the first factor request",
    "9472": "Error building the PPII authentication request",
    "9473": "Empty PPII authentication response",
    "9474": "Empty statusCode in the PPII authentication response",
    "9475": "Empty operation id in the PPII authentication response",
    "9476": "Error processing the PPII authentication response",
    "9477": "Time between PPI steps 1 and 2 exceeded",
    "9478": "Error processing the PPII authorization response",
    "9479": "Empty PPII authorization response",
    "9480": "Empty statusCode in the PPII authorization response",
    "9481": "Merchant is not a Payment Facilitator",
    "9482": "Operation id of an OK authorization is empty or does not match",
    "9483": "Empty PPII refund response",
    "9484": "Empty statusCode or request id in the PPII refund response",
    "9485": "Refund denied",
    "9486": "Empty PPII query response",
    "9487": "Merchant terminal does not have Paygold enabled",
    "9488": "Operation marked as MOTO and merchant has no MOTO payment method",
    "9489": "External MPI operation not allowed",
    "9490": "Redsys MPI parameters received in an external MPI operation",
    "9491": "SecLevel not allowed in an external MPI operation",
    "9492": "External MPI parameters received in a Redsys MPI operation",
    "9493": "MPI parameters received in a non secure operation",
    "9494": "Obsolete signature",
    "9495": "Wrong ApplePay or AndroidPay configuration",
    "9496": "AndroidPay payment method not enabled",
    "9497": "ApplePay payment method not enabled",
    "9498": "ApplePay operation currency or amount do not match",
    "9499": "Error retrieving merchant keys for Android or Apple Pay",
    "9500": "Dynamic DCC error, the card was changed",
    "9501": "Error validating the data sent to generate the operation id",
    "9502": "Error validating the operation id",
    "9503": "Error validating the order",
    "9504": "Error validating the transaction type",
    "9505": "Error validating the currency",
    "9506": "Error validating the amount",
    "9507": "Operation id expired",
    "9508": "Error validating the operation id",
    "9510": "Card data cannot be sent together with an operation id",
    "9511": "Error in the BIN query response",
    "9515": "Merchant has Amex payment enabled in its profile",
    "9516": "Error building the China Union Pay message",
    "9517": "Error setting the China Union Pay key",
    "9518": "Error saving the China Union Pay payment data",
    "9519": "Wrong authentication message",
    "9520": "Empty SecurePlus session message",
    "9521": "Empty response XML",
    "9522": "No parameters received in datosentrada",
    "9523": "Computed signature does not match the one in the response",
    "9524": "MasterCard 3DSecure result is PARes A or VERes N and no CAVV received from the issuer",
    "9525": "Private card cannot be used with this merchant",
    "9526": "Card is not Chinese",
    "9527": "Missing mandatory DS_MERCHANT_BUYERID",
    "9528": "Wrong DS_MERCHANT_BUYERID format in a Sodexo Brasil operation",
    "9529": "Recurring operations not allowed with Voucher cards",
    "9530": "Cancellation more than 7 days after the pre-authorization",
    "9531": "Cancellation more than 72 hours after the deferred pre-authorization",
    "9532": "Request currency does not match the returned one",
    "9533": "Request amount does not match the returned one",
    "9534": "Missing collecting issuer or receipt reference",
    "9535": "Tax payment out of term",
    "9536": "Tax already paid",
    "9537": "Tax payment denied",
    "9538": "Tax payment rejected",
    "9539": "Error sending the SMS",
    "9540": "Mobile number longer than 12 characters",
    "9541": "Reference longer than 40 characters",
    "9542": "Generic error, contact Redsys",
    "9543": "DINERS card and merchant has neither DINERS nor non secure Discover payment methods",
    "9544": "DINERS card and merchant does not have the non secure Discover payment method",
    "9545": "DISCOVER error",
    "9546": "DISCOVER error",
    "9547": "DISCOVER error",
    "9548": "DISCOVER error",
    "9549": "DISCOVER error",
    "9550": "SMS sending manager error, contact Redsys",
    "9551": "Authentication process error",
    "9552": "Authentication result is PARes U",
    "9553": "UPI payment with a card that is not Chinese",
    "9554": "UPI authentication result is PARes U and merchant has no non secure UPI EXPRESSPAY methods",
    "9555": "Administration module connection IP not allowed",
    "9556": "Traditional payment sent and merchant has neither worldwide nor EU traditional payment",
    "9557": "Card on file payment sent and merchant has neither worldwide nor EU traditional payment",
    "9558": "Wrong dsMerchantP2FExpiryDate format",
    "9559": "Operation id of the PPII authentication response is empty or missing",
    "9560": "Error sending the authentication notification to the merchant",
    "9561": "Operation id of an OK separate confirmation is empty or does not match",
    "9562": "Empty PPII separate confirmation response",
    "9563": "Error processing the PPII separate confirmation response",
    "9564": "Error checking DCC amounts before sending the operation to Stratus",
    "9565": "Ds_Merchant_Amount exceeds the allowed length",
    "9566": "Error accessing the new cryptographic server",
    "9567": "Chinese UPI card and merchant has no UPI payment method",
    "9568": "Card query rejected, wrong transaction type",
    "9569": "Card query rejected, card not sent",
    "9570": "Card query rejected, both card and reference sent",
    "9571": "Authentication rejected, protocolVersion missing",
    "9572": "Authentication rejected, protocolVersion not recognised",
    "9573": "Authentication rejected, browserAcceptHeader missing",
    "9574": "Authentication rejected, browserUserAgent missing",
    "9575": "Authentication rejected, browserJavaEnabled missing",
    "9576": "Authentication rejected, browserLanguage missing",
    "9577": "Authentication rejected, browserColorDepth missing",
    "9578": "Authentication rejected, browserScreenHeight missing",
    "9579": "Authentication rejected, browserScreenWidth missing",
    "9580": "Authentication rejected, browserTZ missing",
    "9581": "Authentication rejected, DS_MERCHANT_EMV3DS missing or too large to convert to JSON",
    "9582": "Authentication rejected, threeDSServerTransID missing",
    "9583": "Authentication rejected, threeDSCompInd missing",
    "9584": "Authentication rejected, notificationURL missing",
    "9585": "EMV3DS authentication rejected, no data in the database",
    "9586": "Authentication rejected, PARes missing",
    "9587": "Authentication rejected, MD missing",
    "9588": "Authentication rejected, version differs between AuthenticationData and ChallengeResponse",
    "9589": "Authentication rejected, response without CRes",
    "9590": "Authentication rejected, error reading the CRes response",
    "9591": "Authentication rejected, CRes response without threeDSServerTransID",
    "9592": "Authentication rejected, CRes transStatus differs from the final query",
    "9593": "Authentication rejected, transStatus of the final query not defined",
    "9594": "Authentication rejected, CRes missing",
    "9595": "Merchant has no secure payment methods allowed for 3DSecure V2",
    "9596": "Card query rejected, wrong currency",
    "9597": "Card query rejected, wrong amount",
    "9598": "3DSecure v2 authentication failed and fallback to 3DSecure v1 is not allowed",
    "9599": "3DSecure v2 authentication error",
    "9600": "3DSecure v2 authentication error, Areq response N",
    "9601": "3DSecure v2 authentication error, Areq response R",
    "9602": "3DSecure v2 authentication error, Areq response U and merchant has no U payment method",
    "9603": "Wrong DS_MERCHANT_DCC in an H2H operation (REST and SOAP)",
    "9604": "Wrong DCC data in DS_MERCHANT_DCC in an H2H operation (REST and SOAP)",
    "9605": "Wrong DS_MERCHANT_MPIEXTERNAL in an H2H operation (REST and SOAP)",
    "9606": "Wrong MPI data in DS_MERCHANT_MPIEXTERNAL in an H2H operation (REST and SOAP)",
    "9607": "Wrong MPI TXID in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9608": "Wrong MPI CAVV in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9609": "Wrong MPI ECI in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9610": "Wrong MPI threeDSServerTransID in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9611": "Wrong MPI dsTransID in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9612": "Wrong MPI authenticacionValue in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9613": "Wrong MPI protocolVersion in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9614": "Wrong MPI Eci in DS_MERCHANT_MPIEXTERNAL (REST and SOAP)",
    "9615": "External MPI error, card brand not allowed in SIS for external MPI",
    "9616": "Wrong DS_MERCHANT_EXCEP_SCA value",
    "9617": "DS_MERCHANT_EXCEP_SCA is MIT and no COF or reference payment data was sent",
    "9618": "Exemption not allowed and merchant is not ready to authenticate",
    "9619": "Amazon orderReferenceId received without the payment method configured",
    "9620": "DCC operation markup higher than allowed, DCC data removed",
    "9621": "Invalid amazonOrderReferenceId",
    "9622": "Original operation without the new DCC model flag and merchant configured for the new DCC model",
    "9623": "Original operation with the new DCC model flag and merchant not configured for the new DCC model",
    "9624": "Original operation new DCC model differs from the merchant configuration",
    "9625": "Payment cancellation failed, a refund is already linked to the payment",
    "9626": "Payment refund failed, the operation is already cancelled",
    "9627": "Invalid CRTM reference or request number",
    "9628": "Operation with 3DSecure data received through the SERMEPA entry",
    "9629": "No separate confirmation operation to cancel",
    "9630": "Separate confirmation cancellation failed, a refund is already linked to it",
    "9631": "Separate confirmation cancellation failed, a cancellation is already linked to it",
    "9632": "Separate confirmation to cancel is not authorized",
    "9633": "Cancellation exceeds the configured days after the separate confirmation",
    "9634": "No payment operation to cancel",
    "9635": "Payment cancellation failed, a cancellation is already linked to the payment",
    "9636": "Payment to cancel is not authorized",
    "9637": "Cancellation exceeds the configured days after the payment",
    "9638": "More than one refund to cancel and none specified",
    "9639": "No refund operation to cancel",
    "9640": "Separate confirmation to cancel is not authorized or already cancelled",
    "9641": "Cancellation exceeds the configured days after the refund",
    "9642": "Pre-authorization to replace is older than 30 days",
    "9643": "Error reading the merchant customisation",
    "9644": "3DSecure v2 authentication error, IniciaPeticion data sent to TrataPeticion",
    "9650": "Wrong MAC in the tax payment messages",
    "9651": "Exemption requires SCA and merchant is not ready to authenticate",
    "9652": "Exemption and merchant configuration require no SCA and merchant cannot authorize this card brand",
    "9653": "Authentication rejected, browserJavascriptEnabled missing",
    "9654": "3RI data in IniciaPeticion and TrataPeticion version is not 2.2",
    "9655": "Ds_Merchant_3RI_Ind value not allowed",
    "9656": "Ds_Merchant_3RI_Ind differs between IniciaPeticion and TrataPeticion",
    "9657": "Incomplete 3RI data",
    "9658": "Wrong threeRITrasactionID or original operation not found",
    "9659": "FUC and terminal of threeRITrasactionID do not match the merchant",
    "9660": "3RI-OTA data for Master with empty authenticationValue in TrataPeticion",
    "9661": "3RI-OTA data for Master with empty Eci in TrataPeticion",
    "9662": "Merchant not allowed to make partial confirmations",
    "9663": "No IniciaPeticion data matching the TrataPeticion message",
    "9664": "3DS Server transaction id missing in TrataPeticion but present in IniciaPeticion",
    "9665": "TrataPeticion currency differs from IniciaPeticion",
    "9666": "TrataPeticion amount differs from IniciaPeticion",
    "9667": "TrataPeticion operation type differs from IniciaPeticion",
    "9668": "TrataPeticion reference differs from IniciaPeticion",
    "9669": "TrataPeticion Insite operation id differs from IniciaPeticion",
    "9670": "TrataPeticion card differs from IniciaPeticion",
    "9671": "Denied by TRA Lynx",
    "9672": "Bizum: authentication failed, blocked after three attempts",
    "9673": "Bizum: operation cancelled by the user",
    "9674": "Bizum: credit rejected by the beneficiary",
    "9675": "Bizum: charge rejected by the payer",
    "9676": "Bizum: operation rejected by the processor",
    "9677": "Bizum: insufficient balance",
    "9678": "3DSecure version in TrataPeticion is wrong or higher than the one returned by IniciaPeticion",
    "9680": "EMV3DS authentication error and the brand does not allow fallback to 3DSecure 1.0",
    "9681": "Error saving authentication data in an external MPI operation",
    "9682": "TRA query with wrong Ds_Merchant_TRA_Data",
    "9683": "TRA phase 1 query without Ds_Merchant_TRA_Type",
    "9684": "TRA phase 1 query with a Ds_Merchant_TRA_Type value not allowed",
    "9685": "TRA phase 1 query and merchant profile does not allow TRA exemption",
    "9686": "TRA phase 1 query and merchant configuration does not allow the Redsys TRA",
    "9687": "TRA phase 2 query with missing or wrong Ds_Merchant_TRA_Result",
    "9688": "TRA phase 2 query with missing or wrong Ds_Merchant_TRA_Method",
    "9689": "TRA phase 2 query without a phase 1 operation",
    "9690": "TRA phase 2 query with an error in the Lynx response",
    "9691": "SamsungPay data sent and merchant does not have SamsungPay enabled",
    "9692": "Request signed by a PSP and merchant has no PSP",
    "9693": "Unable to read the data sent by SamsungPay",
    "9694": "SamsungPay payment failed",
    "9700": "PayPal returned KO",
    "9754": "Obsolete 3DSecure V1 authentication",
    "9802": "Wrong DS_MERCHANT_COF_TYPE value",
    "9812": "Error reading XPAYDECODEDDATA parameters",
    "9813": "Error reading Ds_Merchant_BrClientData parameters",
    "9814": "Operation type of the second TrataPeticion differs from the operation",
    "9815": "A Paygold operation with the same data is already being authorized or authorized",
    "9816": "XPAY operation with token and without cryptogram",
    "9817": "3RI authenticated operation cannot be processed, wrong status",
    "9818": "3RI authenticated operation cannot be processed, wrong currency",
    "9819": "3RI authenticated operation cannot be processed, wrong amount",
    "9820": "3RI authenticated operation cannot be processed, expired",
    "9821": "3RI operation not found, wrong ID_OPER_3RI",
    "9822": "Wrong amount in 3RI additional data, total exceeds the authenticated amount",
    "9823": "3RI authenticated operation cannot be processed, card brand has no payment method",
    "9824": "Error saving 3RI data",
    "9836": "No original Paygold operation with the data given",
    "9837": "Ds_Merchant_P2f_ExpiryDate empty or wrongly formatted",
    "9843": "Wrong Ds_Merchant_TokenData",
    "9844": "Merchant profile does not accept tax refunds",
    "9850": "Amazon Pay operation error",
    "9860": "Amazon Pay operation error, the operation can be retried",
    "9899": "Ds_Merchant_Data not correctly signed",
    "9900": "SafetyPay returned KO",
    "9909": "Internal error",
    "9912": "Issuer not available",
    "9913": "SOAP notification exception",
    "9914": "SOAP notification answered KO",
    "9915": "Cancelled by the cardholder",
    "9928": "Cardholder cancelled the pre-authorization",
    "9929": "Cardholder cancelled the operation",
    "9930": "Transfer pending",
    "9931": "Contact your bank",
    "9932": "Denied for fraud (LINX)",
    "9933": "Denied for fraud (LINX)",
    "9934": "Denied, contact your bank",
    "9935": "Denied, contact your bank",
    "9966": "BIZUM returned KO on authorization",
    "9992": "PAE request",
    "9994": "No card selected from the wallet",
    "9995": "Prepaid top-up denied",
    "9996": "Prepaid card top-up not allowed",
    "9997": "Other payments with the same card in progress are denied when one completes",
    "9998": "Operation requesting card data",
    "9999": "Operation redirected to the issuer for authentication",
    # Ds_ErrorCode values
    "SIS0007": "Error reading the input XML",
    "SIS0008": "Missing Ds_Merchant_MerchantCode",
    "SIS0009": "Wrong Ds_Merchant_MerchantCode format",
    "SIS0010": "Missing Ds_Merchant_Terminal",
    "SIS0011": "Wrong Ds_Merchant_Terminal format",
    "SIS0014": "Wrong Ds_Merchant_Order format",
    "SIS0015": "Missing Ds_Merchant_Currency",
    "SIS0016": "Wrong Ds_Merchant_Currency format",
    "SIS0017": "Operations in pesetas are not accepted",
    "SIS0018": "Missing Ds_Merchant_Amount",
    "SIS0019": "Wrong Ds_Merchant_Amount format",
    "SIS0020": "Missing Ds_Merchant_MerchantSignature",
    "SIS0021": "Empty Ds_Merchant_MerchantSignature",
    "SIS0022": "Wrong Ds_Merchant_TransactionType format",
    "SIS0023": "Unknown Ds_Merchant_TransactionType",
    "SIS0024": "Ds_Merchant_ConsumerLanguage longer than 3 characters",
    "SIS0025": "Wrong Ds_Merchant_ConsumerLanguage format",
    "SIS0026": "Merchant or terminal does not exist",
    "SIS0027": "Currency differs from the one assigned to the terminal",
    "SIS0028": "Merchant or terminal deactivated",
    "SIS0030": "Invalid operation type for a card payment",
    "SIS0031": "Payment method not defined",
    "SIS0033": "Mobile payment with an operation type that is neither payment nor pre-authorization",
    "SIS0034": "Database access error",
    "SIS0037": "Invalid phone number",
    "SIS0038": "Java error",
    "SIS0040": "Merchant or terminal has no payment method assigned",
    "SIS0041": "Error computing the merchant data signature",
    "SIS0042": "Wrong signature",
    "SIS0043": "Error sending the online notification",
    "SIS0046": "Card BIN not registered",
    "SIS0051": "Duplicated order number",
    "SIS0054": "No operation to refund",
    "SIS0055": "More than one payment with the same order number",
    "SIS0056": "Operation to refund is not authorized",
    "SIS0057": "Refund amount exceeds the allowed one",
    "SIS0058": "Inconsistent data validating a confirmation",
    "SIS0059": "No operation to confirm",
    "SIS0060": "A confirmation is already linked to the pre-authorization",
    "SIS0061": "Pre-authorization to confirm is not authorized",
    "SIS0062": "Amount to confirm exceeds the allowed one",
    "SIS0063": "Card number not available",
    "SIS0064": "Card number longer than 19 digits",
    "SIS0065": "Card number is not numeric",
    "SIS0066": "Expiry month not available",
    "SIS0067": "Expiry month is not numeric",
    "SIS0068": "Invalid expiry month",
    "SIS0069": "Expiry year not available",
    "SIS0070": "Expiry year is not numeric",
    "SIS0071": "Expired card",
    "SIS0072": "Operation cannot be cancelled",
    "SIS0074": "Missing Ds_Merchant_Order",
    "SIS0075": "Ds_Merchant_Order shorter than 4 or longer than 12 characters",
    "SIS0076": "First four characters of Ds_Merchant_Order are not numeric",
    "SIS0078": "Payment method not available",
    "SIS0079": "Card payment error",
    "SIS0081": "New session, stored data lost",
    "SIS0084": "Ds_Merchant_Conciliation is null",
    "SIS0085": "Ds_Merchant_Conciliation is not numeric",
    "SIS0086": "Ds_Merchant_Conciliation is not 6 characters long",
    "SIS0089": "Ds_Merchant_ExpiryDate is not 4 characters long",
    "SIS0092": "Ds_Merchant_ExpiryDate is null",
    "SIS0093": "Card not found in the range table",
    "SIS0094": "Card not authenticated as 3D Secure",
    "SIS0097": "Invalid Ds_Merchant_CComercio",
    "SIS0098": "Invalid Ds_Merchant_CVentana",
    "SIS0112": "Transaction type in Ds_Merchant_Transaction_Type not allowed",
    "SIS0113": "Exception in the operations servlet",
    "SIS0114": "Called with GET instead of POST",
    "SIS0115": "No operation to pay the instalment on",
    "SIS0116": "Operation to pay an instalment on is not valid",
    "SIS0117": "Operation to pay an instalment on is not authorized",
    "SIS0118": "Total instalment amount exceeded",
    "SIS0119": "Invalid Ds_Merchant_DateFrecuency",
    "SIS0120": "Invalid Ds_Merchant_CargeExpiryDate",
    "SIS0121": "Invalid Ds_Merchant_SumTotal",
    "SIS0122": "Wrong Ds_Merchant_DateFrecuency or Ds_Merchant_SumTotal format",
    "SIS0123": "Transaction deadline exceeded",
    "SIS0124": "Minimum frequency of a successive recurring payment not elapsed",
    "SIS0132": "Authorization confirmation more than 7 days after the pre-authorization",
    "SIS0133": "Authentication confirmation more than 45 days after the previous authentication",
    "SIS0139": "Duplicated initial recurring payment",
    "SIS0142": "Payment time exceeded",
    "SIS0197": "Error reading the shopping cart data in a gateway operation",
    "SIS0198": "Amount exceeds the merchant limit",
    "SIS0199": "Number of operations exceeds the merchant limit",
    "SIS0200": "Accumulated amount exceeds the merchant limit",
    "SIS0214": "Merchant does not accept refunds",
    "SIS0216": "Ds_Merchant_CVV2 longer than 3 or 4 characters",
    "SIS0217": "Wrong Ds_Merchant_CVV2 format",
    "SIS0218": "Merchant does not allow secure operations through the operations entry",
    "SIS0219": "Number of operations of the card exceeds the merchant limit",
    "SIS0220": "Accumulated amount of the card exceeds the merchant limit",
    "SIS0221": "CVV2 is mandatory",
    "SIS0222": "A cancellation is already linked to the pre-authorization",
    "SIS0223": "Pre-authorization to cancel is not authorized",
    "SIS0224": "Merchant cannot cancel operations without extended signature",
    "SIS0225": "No operation to cancel",
    "SIS0226": "Inconsistent data validating a cancellation",
    "SIS0227": "Invalid Ds_Merchant_TransactionDate",
    "SIS0229": "Requested deferred payment code does not exist",
    "SIS0252": "Merchant does not allow sending the card",
    "SIS0253": "Card fails the check digit",
    "SIS0254": "Number of operations from this IP exceeds the merchant limit",
    "SIS0255": "Amount accumulated from this IP exceeds the merchant limit",
    "SIS0256": "Merchant cannot perform pre-authorizations",
    "SIS0257": "Card does not allow pre-authorizations",
    "SIS0258": "Inconsistent data validating a confirmation",
    "SIS0261": "Operation stopped by the SIS entry restrictions",
    "SIS0270": "Merchant cannot perform deferred authorizations",
    "SIS0274": "Unknown operation type or not allowed by this SIS entry",
    "SIS0298": "Merchant does not allow card on file operations",
    "SIS0319": "Merchant does not belong to the group in Ds_Merchant_Group",
    "SIS0321": "Reference in Ds_Merchant_Identifier is not linked to the merchant",
    "SIS0322": "Wrong Ds_Merchant_Group format",
    "SIS0325": "No screens requested but no card reference sent",
    "SIS0429": "Wrong Ds_SignatureVersion",
    "SIS0430": "Unable to decode Ds_MerchantParameters",
    "SIS0431": "Wrong JSON object in Ds_MerchantParameters",
    "SIS0432": "Wrong merchant FUC code",
    "SIS0433": "Wrong merchant terminal",
    "SIS0434": "Missing order number in the merchant operation",
    "SIS0435": "Error computing the signature",
}


def describe_response(code: Any, table: Mapping[Any, str] | None = None) -> str:
    """Look up the description of a Redsys response or error code.

    Numeric codes are matched both as given and zero padded to four digits,
    so 101, "101" and "0101" all find the same entry.
    """
    if table is None:
        table = REDSYS_RESPONSE_CODES
    if code is None:
        return UNKNOWN_RESPONSE_CODE

    raw = str(code).strip()
    candidates: list[Any] = [raw]
    if raw.isdigit():
        candidates += [raw.zfill(4), int(raw)]

    for candidate in candidates:
        if candidate in table:
            return table[candidate]
    return UNKNOWN_RESPONSE_CODE
