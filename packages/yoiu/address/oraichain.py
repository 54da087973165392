from yoiu.config import TESTNET

swap_router = {
    TESTNET: "orai1e4k9zhjpz3a0q6fgspwj3ug5fhc3t2emtxuvtra79hs70gqq7m0sg8kdd5",
}

usdt = {
    TESTNET: "orai1laj3d4zledty0r0vd7m3gem4cd7cyk09m608863p3t7p6sm6xmusru4l5p",
}

validators = {
    TESTNET: ["oraivaloper18hr8jggl3xnrutfujy2jwpeu0l76azprkxn29v"],
}
