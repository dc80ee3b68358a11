"""Fixed deployment parameters for the SSB contract."""

SSB_ARTIFACT_NAME = "SSB"

# Positional, in constructor order:
# (string name, string symbol, address payable beneficiary, address payable royaltyReceiver)
SSB_CONSTRUCTOR_ARGS = (
    "SSB Gang",
    "SSB",
    "0x76cBbaF24a9b9008E534399167b658Ea57F1c750",
    "0x76cBbaF24a9b9008E534399167b658Ea57F1c750",
)

SUCCESS_LABEL = "ssb deployed to:"
