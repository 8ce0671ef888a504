"""Language strings and cheat codes that a patch may replace.

Strings are addressed by their BEX mnemonic and emitted under their DDF
language name. Several BEX mnemonics may share one DDF name.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    ldf_name: str
    bex_name: str


@dataclass(frozen=True, slots=True)
class CheatEntry:
    orig_text: str     # vanilla code; replacements are truncated to its length
    ldf_name: str
    deh_name: str      # field name in the patch's [CHEAT] section


LANGUAGE_ENTRIES: tuple[LanguageEntry, ...] = tuple(LanguageEntry(*row) for row in (
    ("AutoMapFollowOff", "AMSTR_FOLLOWOFF"),
    ("AutoMapFollowOn", "AMSTR_FOLLOWON"),
    ("AutoMapGridOff", "AMSTR_GRIDOFF"),
    ("AutoMapGridOn", "AMSTR_GRIDON"),
    ("AutoMapMarkedSpot", "AMSTR_MARKEDSPOT"),
    ("AutoMapMarksClear", "AMSTR_MARKSCLEARED"),
    ("DevelopmentMode", "D_DEVSTR"),
    ("PressToQuit", "DOSY"),
    ("EmptySlot", "EMPTYSTRING"),
    ("EndGameCheck", "ENDGAME"),
    ("GammaOff", "GAMMALVL0"),
    ("GammaLevelOne", "GAMMALVL1"),
    ("GammaLevelTwo", "GAMMALVL2"),
    ("GammaLevelThree", "GAMMALVL3"),
    ("GammaLevelFour", "GAMMALVL4"),
    ("GameSaved", "GGSAVED"),
    ("GotArmourHelmet", "GOTARMBONUS"),
    ("GotArmour", "GOTARMOR"),
    ("GotBackpack", "GOTBACKPACK"),
    ("GotBerserk", "GOTBERSERK"),
    ("GotBFG", "GOTBFG9000"),
    ("GotBlueCard", "GOTBLUECARD"),
    ("GotBlueSkull", "GOTBLUESKUL"),
    ("GotCellPack", "GOTCELLBOX"),
    ("GotCell", "GOTCELL"),
    ("GotChainGun", "GOTCHAINGUN"),
    ("GotChainSaw", "GOTCHAINSAW"),
    ("GotClipBox", "GOTCLIPBOX"),
    ("GotClip", "GOTCLIP"),
    ("GotHealthPotion", "GOTHTHBONUS"),
    ("GotInvis", "GOTINVIS"),
    ("GotInvulner", "GOTINVUL"),
    ("GotRocketLauncher", "GOTLAUNCHER"),
    ("GotMap", "GOTMAP"),
    ("GotMedi", "GOTMEDIKIT"),
    ("GotMediNeed", "GOTMEDINEED"),
    ("GotMegaArmour", "GOTMEGA"),
    ("GotMega", "GOTMSPHERE"),
    ("GotPlasmaGun", "GOTPLASMA"),
    ("GotRedCard", "GOTREDCARD"),
    ("GotRedSkull", "GOTREDSKULL"),
    ("GotRocketBox", "GOTROCKBOX"),
    ("GotRocket", "GOTROCKET"),
    ("GotShellBox", "GOTSHELLBOX"),
    ("GotShells", "GOTSHELLS"),
    ("GotDoubleBarrel", "GOTSHOTGUN2"),
    ("GotShotgun", "GOTSHOTGUN"),
    ("GotStim", "GOTSTIM"),
    ("GotSuit", "GOTSUIT"),
    ("GotSoul", "GOTSUPER"),
    ("GotVisor", "GOTVISOR"),
    ("GotYellowCard", "GOTYELWCARD"),
    ("GotYellowSkull", "GOTYELWSKUL"),
    ("DefaultCHATMACRO0", "HUSTR_CHATMACRO0"),
    ("DefaultCHATMACRO1", "HUSTR_CHATMACRO1"),
    ("DefaultCHATMACRO2", "HUSTR_CHATMACRO2"),
    ("DefaultCHATMACRO3", "HUSTR_CHATMACRO3"),
    ("DefaultCHATMACRO4", "HUSTR_CHATMACRO4"),
    ("DefaultCHATMACRO5", "HUSTR_CHATMACRO5"),
    ("DefaultCHATMACRO6", "HUSTR_CHATMACRO6"),
    ("DefaultCHATMACRO7", "HUSTR_CHATMACRO7"),
    ("DefaultCHATMACRO8", "HUSTR_CHATMACRO8"),
    ("DefaultCHATMACRO9", "HUSTR_CHATMACRO9"),
    ("Sent", "HUSTR_MESSAGESENT"),
    ("UnsentMsg", "HUSTR_MSGU"),
    ("Player3Name", "HUSTR_PLRBROWN"),
    ("Player1Name", "HUSTR_PLRGREEN"),
    ("Player2Name", "HUSTR_PLRINDIGO"),
    ("Player4Name", "HUSTR_PLRRED"),
    ("TALKTOSELF1", "HUSTR_TALKTOSELF1"),
    ("TALKTOSELF2", "HUSTR_TALKTOSELF2"),
    ("TALKTOSELF3", "HUSTR_TALKTOSELF3"),
    ("TALKTOSELF4", "HUSTR_TALKTOSELF4"),
    ("TALKTOSELF5", "HUSTR_TALKTOSELF5"),
    ("NoLoadInNetGame", "LOADNET"),
    ("MessagesOff", "MSGOFF"),
    ("MessagesOn", "MSGON"),
    ("EndNetGame", "NETEND"),
    ("NewNetGame", "NEWGAME"),
    ("NightmareCheck", "NIGHTMARE"),
    ("NeedBlueCardForDoor", "PD_BLUEC"),
    ("NeedBlueForDoor", "PD_BLUEK"),
    ("NeedBlueForObject", "PD_BLUEO"),
    ("NeedBlueSkullForDoor", "PD_BLUES"),
    ("NeedRedCardForDoor", "PD_REDC"),
    ("NeedRedForDoor", "PD_REDK"),
    ("NeedRedForObject", "PD_REDO"),
    ("NeedRedSkullForDoor", "PD_REDS"),
    ("NeedYellowCardForDoor", "PD_YELLOWC"),
    ("NeedYellowForDoor", "PD_YELLOWK"),
    ("NeedYellowSkullForDoor", "PD_YELLOWS"),
    ("NeedYellowForObject", "PD_YELLOWO"),
    ("PressKey", "PRESSKEY"),
    ("PressYorN", "PRESSYN"),
    ("NoQLoadInNetGame", "QLOADNET"),
    ("QuickLoad", "QLPROMPT"),
    ("NoQuickSaveSlot", "QSAVESPOT"),
    ("QuickSaveOver", "QSPROMPT"),
    ("SaveWhenNotPlaying", "SAVEDEAD"),
    ("BEHOLDNote", "STSTR_BEHOLD"),
    ("BEHOLDUsed", "STSTR_BEHOLDX"),
    ("ChoppersNote", "STSTR_CHOPPERS"),
    ("LevelChange", "STSTR_CLEV"),
    ("GodModeOFF", "STSTR_DQDOFF"),
    ("GodModeON", "STSTR_DQDON"),
    ("AmmoAdded", "STSTR_FAADDED"),
    ("VeryHappyAmmo", "STSTR_KFAADDED"),
    ("MusChange", "STSTR_MUS"),
    ("ClipOFF", "STSTR_NCOFF"),
    ("ClipON", "STSTR_NCON"),
    ("ImpossibleChange", "STSTR_NOMUS"),
    ("E1M1Desc", "HUSTR_E1M1"),
    ("E1M2Desc", "HUSTR_E1M2"),
    ("E1M3Desc", "HUSTR_E1M3"),
    ("E1M4Desc", "HUSTR_E1M4"),
    ("E1M5Desc", "HUSTR_E1M5"),
    ("E1M6Desc", "HUSTR_E1M6"),
    ("E1M7Desc", "HUSTR_E1M7"),
    ("E1M8Desc", "HUSTR_E1M8"),
    ("E1M9Desc", "HUSTR_E1M9"),
    ("E2M1Desc", "HUSTR_E2M1"),
    ("E2M2Desc", "HUSTR_E2M2"),
    ("E2M3Desc", "HUSTR_E2M3"),
    ("E2M4Desc", "HUSTR_E2M4"),
    ("E2M5Desc", "HUSTR_E2M5"),
    ("E2M6Desc", "HUSTR_E2M6"),
    ("E2M7Desc", "HUSTR_E2M7"),
    ("E2M8Desc", "HUSTR_E2M8"),
    ("E2M9Desc", "HUSTR_E2M9"),
    ("E3M1Desc", "HUSTR_E3M1"),
    ("E3M2Desc", "HUSTR_E3M2"),
    ("E3M3Desc", "HUSTR_E3M3"),
    ("E3M4Desc", "HUSTR_E3M4"),
    ("E3M5Desc", "HUSTR_E3M5"),
    ("E3M6Desc", "HUSTR_E3M6"),
    ("E3M7Desc", "HUSTR_E3M7"),
    ("E3M8Desc", "HUSTR_E3M8"),
    ("E3M9Desc", "HUSTR_E3M9"),
    ("E4M1Desc", "HUSTR_E4M1"),
    ("E4M2Desc", "HUSTR_E4M2"),
    ("E4M3Desc", "HUSTR_E4M3"),
    ("E4M4Desc", "HUSTR_E4M4"),
    ("E4M5Desc", "HUSTR_E4M5"),
    ("E4M6Desc", "HUSTR_E4M6"),
    ("E4M7Desc", "HUSTR_E4M7"),
    ("E4M8Desc", "HUSTR_E4M8"),
    ("E4M9Desc", "HUSTR_E4M9"),
    ("Episode1Text", "E1TEXT"),
    ("Episode2Text", "E2TEXT"),
    ("Episode3Text", "E3TEXT"),
    ("Episode4Text", "E4TEXT"),
    ("Map10Desc", "HUSTR_10"),
    ("Map11Desc", "HUSTR_11"),
    ("Map12Desc", "HUSTR_12"),
    ("Map13Desc", "HUSTR_13"),
    ("Map14Desc", "HUSTR_14"),
    ("Map15Desc", "HUSTR_15"),
    ("Map16Desc", "HUSTR_16"),
    ("Map17Desc", "HUSTR_17"),
    ("Map18Desc", "HUSTR_18"),
    ("Map19Desc", "HUSTR_19"),
    ("Map01Desc", "HUSTR_1"),
    ("Map20Desc", "HUSTR_20"),
    ("Map21Desc", "HUSTR_21"),
    ("Map22Desc", "HUSTR_22"),
    ("Map23Desc", "HUSTR_23"),
    ("Map24Desc", "HUSTR_24"),
    ("Map25Desc", "HUSTR_25"),
    ("Map26Desc", "HUSTR_26"),
    ("Map27Desc", "HUSTR_27"),
    ("Map28Desc", "HUSTR_28"),
    ("Map29Desc", "HUSTR_29"),
    ("Map02Desc", "HUSTR_2"),
    ("Map30Desc", "HUSTR_30"),
    ("Map31Desc", "HUSTR_31"),
    ("Map32Desc", "HUSTR_32"),
    ("Map03Desc", "HUSTR_3"),
    ("Map04Desc", "HUSTR_4"),
    ("Map05Desc", "HUSTR_5"),
    ("Map06Desc", "HUSTR_6"),
    ("Map07Desc", "HUSTR_7"),
    ("Map08Desc", "HUSTR_8"),
    ("Map09Desc", "HUSTR_9"),
    ("Level7Text", "C1TEXT"),
    ("Level12Text", "C2TEXT"),
    ("Level21Text", "C3TEXT"),
    ("EndGameText", "C4TEXT"),
    ("Level31Text", "C5TEXT"),
    ("Level32Text", "C6TEXT"),
    ("Tnt10Desc", "THUSTR_10"),
    ("Tnt11Desc", "THUSTR_11"),
    ("Tnt12Desc", "THUSTR_12"),
    ("Tnt13Desc", "THUSTR_13"),
    ("Tnt14Desc", "THUSTR_14"),
    ("Tnt15Desc", "THUSTR_15"),
    ("Tnt16Desc", "THUSTR_16"),
    ("Tnt17Desc", "THUSTR_17"),
    ("Tnt18Desc", "THUSTR_18"),
    ("Tnt19Desc", "THUSTR_19"),
    ("Tnt01Desc", "THUSTR_1"),
    ("Tnt20Desc", "THUSTR_20"),
    ("Tnt21Desc", "THUSTR_21"),
    ("Tnt22Desc", "THUSTR_22"),
    ("Tnt23Desc", "THUSTR_23"),
    ("Tnt24Desc", "THUSTR_24"),
    ("Tnt25Desc", "THUSTR_25"),
    ("Tnt26Desc", "THUSTR_26"),
    ("Tnt27Desc", "THUSTR_27"),
    ("Tnt28Desc", "THUSTR_28"),
    ("Tnt29Desc", "THUSTR_29"),
    ("Tnt02Desc", "THUSTR_2"),
    ("Tnt30Desc", "THUSTR_30"),
    ("Tnt31Desc", "THUSTR_31"),
    ("Tnt32Desc", "THUSTR_32"),
    ("Tnt03Desc", "THUSTR_3"),
    ("Tnt04Desc", "THUSTR_4"),
    ("Tnt05Desc", "THUSTR_5"),
    ("Tnt06Desc", "THUSTR_6"),
    ("Tnt07Desc", "THUSTR_7"),
    ("Tnt08Desc", "THUSTR_8"),
    ("Tnt09Desc", "THUSTR_9"),
    ("TntLevel7Text", "T1TEXT"),
    ("TntLevel12Text", "T2TEXT"),
    ("TntLevel21Text", "T3TEXT"),
    ("TntEndGameText", "T4TEXT"),
    ("TntLevel31Text", "T5TEXT"),
    ("TntLevel32Text", "T6TEXT"),
    ("Plut10Desc", "PHUSTR_10"),
    ("Plut11Desc", "PHUSTR_11"),
    ("Plut12Desc", "PHUSTR_12"),
    ("Plut13Desc", "PHUSTR_13"),
    ("Plut14Desc", "PHUSTR_14"),
    ("Plut15Desc", "PHUSTR_15"),
    ("Plut16Desc", "PHUSTR_16"),
    ("Plut17Desc", "PHUSTR_17"),
    ("Plut18Desc", "PHUSTR_18"),
    ("Plut19Desc", "PHUSTR_19"),
    ("Plut01Desc", "PHUSTR_1"),
    ("Plut20Desc", "PHUSTR_20"),
    ("Plut21Desc", "PHUSTR_21"),
    ("Plut22Desc", "PHUSTR_22"),
    ("Plut23Desc", "PHUSTR_23"),
    ("Plut24Desc", "PHUSTR_24"),
    ("Plut25Desc", "PHUSTR_25"),
    ("Plut26Desc", "PHUSTR_26"),
    ("Plut27Desc", "PHUSTR_27"),
    ("Plut28Desc", "PHUSTR_28"),
    ("Plut29Desc", "PHUSTR_29"),
    ("Plut02Desc", "PHUSTR_2"),
    ("Plut30Desc", "PHUSTR_30"),
    ("Plut31Desc", "PHUSTR_31"),
    ("Plut32Desc", "PHUSTR_32"),
    ("Plut03Desc", "PHUSTR_3"),
    ("Plut04Desc", "PHUSTR_4"),
    ("Plut05Desc", "PHUSTR_5"),
    ("Plut06Desc", "PHUSTR_6"),
    ("Plut07Desc", "PHUSTR_7"),
    ("Plut08Desc", "PHUSTR_8"),
    ("Plut09Desc", "PHUSTR_9"),
    ("PlutLevel7Text", "P1TEXT"),
    ("PlutLevel12Text", "P2TEXT"),
    ("PlutLevel21Text", "P3TEXT"),
    ("PlutEndGameText", "P4TEXT"),
    ("PlutLevel31Text", "P5TEXT"),
    ("PlutLevel32Text", "P6TEXT"),
    ("Commercial", "X_COMMERC"),
    ("Registered", "X_REGIST"),
    ("Title1", "X_TITLE1"),
    ("Title2", "X_TITLE2"),
    ("Title3", "X_TITLE3"),
    ("Notice", "X_MODIFIED"),
    ("Notice", "X_NODIST1"),
    ("Notice", "X_NODIST2"),
    ("CDRom", "D_CDROM"),
    ("DetailHigh", "DETAILHI"),
    ("DetailLow", "DETAILLO"),
    ("QuitMsg", "QUITMSG"),
    ("Shareware", "SWSTRING"),
    ("ZombiemanName", "CC_ZOMBIE"),
    ("ShotgunGuyName", "CC_SHOTGUN"),
    ("HeavyWeaponDudeName", "CC_HEAVY"),
    ("ImpName", "CC_IMP"),
    ("DemonName", "CC_DEMON"),
    ("LostSoulName", "CC_LOST"),
    ("CacodemonName", "CC_CACO"),
    ("HellKnightName", "CC_HELL"),
    ("BaronOfHellName", "CC_BARON"),
    ("ArachnotronName", "CC_ARACH"),
    ("PainElementalName", "CC_PAIN"),
    ("RevenantName", "CC_REVEN"),
    ("MancubusName", "CC_MANCU"),
    ("ArchVileName", "CC_ARCH"),
    ("SpiderMastermindName", "CC_SPIDER"),
    ("CyberdemonName", "CC_CYBER"),
    ("OurHeroName", "CC_HERO"),
    ("OB_Arachnotron", "OB_BABY"),
    ("OB_Archvile", "OB_VILE"),
    ("OB_Baron", "OB_BARON"),
    ("OB_BaronClaw", "OB_BARONHIT"),
    ("OB_CacoBite", "OB_CACOHIT"),
    ("OB_Cacodemon", "OB_CACO"),
    ("OB_ChaingunGuy", "OB_CHAINGUY"),
    ("OB_Cyberdemon", "OB_CYBORG"),
    ("OB_Mastermind", "OB_SPIDER"),
    ("OB_WolfSS", "OB_WOLFSS"),
    ("OB_Demon", "OB_DEMONHIT"),
    ("OB_Imp", "OB_IMP"),
    ("OB_ImpClaw", "OB_IMPHIT"),
    ("OB_Mancubus", "OB_FATSO"),
    ("OB_Revenant", "OB_UNDEAD"),
    ("OB_RevPunch", "OB_UNDEADHIT"),
    ("OB_ShotgunGuy", "OB_SHOTGUY"),
    ("OB_Skull", "OB_SKULL"),
    ("OB_Zombie", "OB_ZOMBIE"),
    ("OB_Chaingun", "OB_MPCHAINGUN"),
    ("OB_Pistol", "OB_MPPISTOL"),
    ("OB_Missile", "OB_MPROCKET"),
    ("OB_Missile", "OB_MPR_SPLASH"),
    ("OB_Plasma", "OB_MPPLASMARIFLE"),
    ("OB_Punch", "OB_MPFIST"),
    ("OB_Saw", "OB_MPCHAINSAW"),
    ("OB_Shotgun", "OB_MPSHOTGUN"),
    ("OB_BFG", "OB_MPBFG_BOOM"),
    ("OB_BFG", "OB_MPBFG_SPLASH"),
    ("OB_BFG", "OB_MPBFG_MBF"),
))

CHEATS: tuple[CheatEntry, ...] = (
    CheatEntry("idbehold", "idbehold9", "BEHOLD menu"),
    CheatEntry("idbeholda", "idbehold5", "Auto-map"),
    CheatEntry("idbeholdi", "idbehold3", "Invisibility"),
    CheatEntry("idbeholdl", "idbehold6", "Lite-Amp Goggles"),
    CheatEntry("idbeholdr", "idbehold4", "Radiation Suit"),
    CheatEntry("idbeholds", "idbehold2", "Berserk"),
    CheatEntry("idbeholdv", "idbehold1", "Invincibility"),
    CheatEntry("idchoppers", "idchoppers", "Chainsaw"),
    CheatEntry("idclev", "idclev", "Level Warp"),
    CheatEntry("idclip", "idclip", "No Clipping 2"),
    CheatEntry("iddqd", "iddqd", "God mode"),
    CheatEntry("iddt", "iddt", "Map cheat"),
    CheatEntry("idfa", "idfa", "Ammo"),
    CheatEntry("idkfa", "idkfa", "Ammo & Keys"),
    CheatEntry("idmus", "idmus", "Change music"),
    CheatEntry("idmypos", "idmypos", "Player Position"),
    CheatEntry("idspispopd", "idspispopd", "No Clipping 1"),
)

# BEX strings with no DDF counterpart
UNSUPPORTED_BEX_STRINGS = frozenset((
    "BGCASTCALL", "BGFLAT06", "BGFLAT11", "BGFLAT15", "BGFLAT20",
    "BGFLAT30", "BGFLAT31", "BGFLATE1", "BGFLATE2", "BGFLATE3", "BGFLATE4",
    "PD_ALL3", "PD_ALL6", "PD_ANY", "RESTARTLEVEL", "SAVEGAMENAME",
    "STARTUP1", "STARTUP2", "STARTUP3", "STARTUP4", "STARTUP5",
    "STSTR_COMPOFF", "STSTR_COMPON",
))

# Doom cheat strings were terminated with an 0xff byte
CHEAT_END_MARK = "\xff"


def find_language_entry(bex_name: str) -> int | None:
    """Index of the first entry with this BEX mnemonic (case-insensitive)."""
    key = bex_name.upper()
    for idx, entry in enumerate(LANGUAGE_ENTRIES):
        if entry.bex_name.upper() == key:
            return idx
    return None


def find_cheat(deh_name: str) -> int | None:
    key = deh_name.lower()
    for idx, cheat in enumerate(CHEATS):
        if cheat.deh_name.lower() == key:
            return idx
    return None


def truncate_cheat(cheat: CheatEntry, text: str) -> str:
    """Cut a replacement to the original code's length or at its end mark."""
    length = len(cheat.orig_text)
    end_pos = text.find(CHEAT_END_MARK)
    if 1 < end_pos < length:
        length = end_pos
    return text[:length]
