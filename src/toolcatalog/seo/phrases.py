"""Static per-locale phrases for synthesized how-to steps."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from toolcatalog.foundation.core import DEFAULT_LOCALE, Locale


@dataclass(frozen=True, slots=True)
class HowToPhrases:
    """Templates; placeholders: {title}, {formats}, {max_files}, {feature}, {output}."""

    name: str
    upload_name: str
    upload_text: str
    feature_text: str
    download_name: str
    download_text: str


_PHRASES: Final = MappingProxyType({
    Locale.EN: HowToPhrases(
        name="How to use {title}",
        upload_name="Upload your file",
        upload_text="Select your file ({formats}). Up to {max_files} file(s) per run.",
        feature_text="Use the {feature} option to adjust your document.",
        download_name="Download the result",
        download_text="Save the finished document as {output}.",
    ),
    Locale.JA: HowToPhrases(
        name="{title}の使い方",
        upload_name="ファイルをアップロード",
        upload_text="ファイル（{formats}）を選択します。1回につき最大{max_files}ファイルまで。",
        feature_text="「{feature}」オプションで文書を調整します。",
        download_name="結果をダウンロード",
        download_text="完成した文書を{output}として保存します。",
    ),
    Locale.KO: HowToPhrases(
        name="{title} 사용 방법",
        upload_name="파일 업로드",
        upload_text="파일({formats})을 선택하세요. 한 번에 최대 {max_files}개까지 가능합니다.",
        feature_text="'{feature}' 옵션으로 문서를 조정하세요.",
        download_name="결과 다운로드",
        download_text="완성된 문서를 {output} 형식으로 저장하세요.",
    ),
    Locale.ES: HowToPhrases(
        name="Cómo usar {title}",
        upload_name="Sube tu archivo",
        upload_text="Selecciona tu archivo ({formats}). Hasta {max_files} archivo(s) por proceso.",
        feature_text="Usa la opción «{feature}» para ajustar tu documento.",
        download_name="Descarga el resultado",
        download_text="Guarda el documento final como {output}.",
    ),
    Locale.FR: HowToPhrases(
        name="Comment utiliser {title}",
        upload_name="Importez votre fichier",
        upload_text="Sélectionnez votre fichier ({formats}). Jusqu'à {max_files} fichier(s) par traitement.",
        feature_text="Utilisez l'option « {feature} » pour ajuster votre document.",
        download_name="Téléchargez le résultat",
        download_text="Enregistrez le document final au format {output}.",
    ),
    Locale.DE: HowToPhrases(
        name="So verwenden Sie {title}",
        upload_name="Datei hochladen",
        upload_text="Wählen Sie Ihre Datei ({formats}). Bis zu {max_files} Datei(en) pro Durchgang.",
        feature_text="Nutzen Sie die Option „{feature}“, um Ihr Dokument anzupassen.",
        download_name="Ergebnis herunterladen",
        download_text="Speichern Sie das fertige Dokument als {output}.",
    ),
    Locale.ZH: HowToPhrases(
        name="如何使用{title}",
        upload_name="上传文件",
        upload_text="选择您的文件（{formats}）。每次最多 {max_files} 个文件。",
        feature_text="使用“{feature}”选项调整您的文档。",
        download_name="下载结果",
        download_text="将完成的文档保存为 {output}。",
    ),
    Locale.PT: HowToPhrases(
        name="Como usar {title}",
        upload_name="Envie seu arquivo",
        upload_text="Selecione seu arquivo ({formats}). Até {max_files} arquivo(s) por vez.",
        feature_text="Use a opção \"{feature}\" para ajustar seu documento.",
        download_name="Baixe o resultado",
        download_text="Salve o documento final como {output}.",
    ),
})


def how_to_phrases(locale: str) -> HowToPhrases:
    """Phrases for `locale`, falling back to the default locale for anything unknown."""
    return _PHRASES.get(locale, _PHRASES[DEFAULT_LOCALE])  # type: ignore[call-overload]


def humanize_feature(tag: str) -> str:
    """'draw-signature' -> 'Draw signature'."""
    words = tag.replace("_", "-").split("-")
    return " ".join(w for w in words if w).capitalize()
