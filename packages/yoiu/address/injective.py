from yoiu.config import TESTNET

swap_router = {
    TESTNET: "inj10x2pnsjlwmdmuzu7klp25hyr222805v4h4tvns",
}

usdt = {
    TESTNET: "peggy0x87aB3B4C8661e07D6372361211B96ed4Dc36B1B5",
}

validators = {
    TESTNET: ["injvaloper1cq6mvxqp978f6lxrh5s6c35ddr2slcj9h7tqng"],
}

# contracts the ido deployment points at
nft = {
    TESTNET: "inj19ly43dgrr2vce8h02a8nw0qujwhrzm9yv8d75c",
}

tier = {
    TESTNET: "inj15nmkxpn9a4lfd5e555ggeldte0zlqmm9695h77",
}
