"""
ThumbHash Studio
Compact image placeholders: encode images to ThumbHashes and render them back
"""

import argparse
import base64
import binascii
import logging
import sys


def run_encode(args):
    """Encode an image file (or a synthetic image) and print a report."""
    from models.codec_params import CodecParams
    from engines.pipeline import encode_reconstruct
    from utils.test_images import generate_quadrants
    from utils.image_io import load_image, save_image
    
    if args.synthetic:
        print("Generating test image...")
        image = generate_quadrants(64, 64)
    else:
        print(f"Loading: {args.image}")
        image = load_image(args.image)
    
    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    
    params = CodecParams(max_input_size=args.max_size, interpolation=args.interpolation)
    result = encode_reconstruct(image, params)
    
    r, g, b, a = result.average_rgba
    print("\n=== Results ===")
    print(f"ThumbHash: {result.hash_base64}")
    print(f"Bytes:     {result.hash_length}")
    print(f"Average:   rgba({r:.3f}, {g:.3f}, {b:.3f}, {a:.3f})")
    print(f"Aspect:    {result.aspect_ratio:.3f}")
    print(f"Size:      {result.placeholder.width}x{result.placeholder.height}")
    if result.psnr_rgb is not None:
        print(f"PSNR:      {result.psnr_rgb:.2f} dB")
    if result.ssim_rgb is not None:
        print(f"SSIM:      {result.ssim_rgb:.4f}")
    print(f"Time:      {result.encode_time_ms + result.decode_time_ms:.2f} ms")
    
    if args.output:
        save_image(result.placeholder.rgba, args.output)
        print(f"\nSaved: {args.output}")
    return 0


def run_decode(args):
    """Render a base64 ThumbHash to an image file."""
    from engines.codec import thumb_hash_to_rgba
    from utils.errors import InvalidArgumentError
    from utils.image_io import save_image
    
    try:
        thumb_hash = base64.b64decode(args.thumb_hash, validate=True)
        image = thumb_hash_to_rgba(thumb_hash)
    except (binascii.Error, InvalidArgumentError) as e:
        print(f"Invalid ThumbHash: {e}", file=sys.stderr)
        return 1
    
    save_image(image.rgba, args.output)
    print(f"Rendered {image.width}x{image.height} placeholder")
    print(f"Saved: {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='thumbhash-studio', description=__doc__.strip().splitlines()[0])
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    encode = subparsers.add_parser('encode', help='Encode an image to a ThumbHash')
    encode.add_argument('image', nargs='?', help='Input image path')
    encode.add_argument('--synthetic', action='store_true', help='Use a generated test image')
    encode.add_argument('-o', '--output', help='Save the rendered placeholder here')
    encode.add_argument('--max-size', type=int, default=100, help='Fit input within this size (1-100)')
    encode.add_argument('--interpolation', choices=['area', 'linear', 'nearest'], default='area')
    encode.set_defaults(func=run_encode)
    
    decode = subparsers.add_parser('decode', help='Render a base64 ThumbHash')
    decode.add_argument('thumb_hash', help='Base64 ThumbHash')
    decode.add_argument('output', nargs='?', default='placeholder.png', help='Output image path')
    decode.set_defaults(func=run_decode)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == 'encode' and bool(args.image) == args.synthetic:
        parser.error('encode needs exactly one of <image> or --synthetic')
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
